from idsort.ocr.example_adapter import ExampleOcrAdapter


class TestExampleOcrAdapter:
    def test_known_payload_returns_text(self) -> None:
        adapter = ExampleOcrAdapter({b"front": "SMITH, JOHN DOB 01/02/1990"})
        result = adapter.recognize(b"front")
        assert result.text == "SMITH, JOHN DOB 01/02/1990"
        assert result.confidence == 100.0

    def test_unknown_payload_returns_empty(self) -> None:
        result = ExampleOcrAdapter().recognize(b"anything")
        assert result.text == ""
        assert result.confidence == 0.0
