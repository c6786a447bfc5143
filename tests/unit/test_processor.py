from unittest.mock import MagicMock

import pytest

from idsort.config.settings import Settings
from idsort.filenames.roles import Role
from idsort.grouping.engine import GroupingEngine
from idsort.ocr.base import BaseOcrEngine
from idsort.ocr.exceptions import OcrError
from idsort.ocr.models import OcrResult
from idsort.processor.models import ImageFile, ProcessingStatus
from idsort.processor.processor import BatchResult, Processor, build_processor

FRONT_TEXT = "DRIVER LICENSE\nSMITH, JOHN\nDOB 01/02/1990 EXP 01/02/2030"


def _files() -> list[ImageFile]:
    return [
        ImageFile(filename="john_smith_front.jpg", content=b"front"),
        ImageFile(filename="john_smith_back.jpg", content=b"back"),
        ImageFile(filename="vacation.jpg", content=b"other"),
    ]


def _processor(engine: MagicMock) -> Processor:
    return build_processor(Settings(), ocr_engine=engine)


class TestProcessorPipeline:
    def test_only_fronts_are_recognized(self) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.return_value = OcrResult(text=FRONT_TEXT, confidence=91.0)

        _processor(engine).process(_files())

        engine.recognize.assert_called_once_with(b"front")

    def test_completed_batch_groups_by_identity(self) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.return_value = OcrResult(text=FRONT_TEXT, confidence=91.0)

        result = _processor(engine).process(_files())

        assert isinstance(result, BatchResult)
        assert result.completed == 3
        assert result.failed == 0
        cluster = result.clusters["john_smith"]
        assert cluster.name == "John Smith"
        assert [i.filename for i in cluster.ordered_images()] == [
            "john_smith_front.jpg",
            "john_smith_back.jpg",
        ]
        assert "Date of Birth: 01/02/1990" in cluster.text_data
        assert result.clusters.total_images() == 3

    def test_roles_are_assigned(self) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.return_value = OcrResult(text=FRONT_TEXT, confidence=91.0)

        result = _processor(engine).process(_files())

        assert [i.role for i in result.images] == [Role.FRONT, Role.BACK, Role.UNKNOWN]

    def test_ocr_failure_marks_image_failed_and_batch_continues(self) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.side_effect = OcrError("tesseract recognition failed: boom")

        result = _processor(engine).process(_files())

        front = result.images[0]
        assert front.status is ProcessingStatus.FAILED
        assert front.error == "tesseract recognition failed: boom"
        assert front.identity is None
        assert result.failed == 1
        assert result.completed == 2
        # Still grouped by filename.
        cluster = result.clusters["john_smith"]
        assert front in cluster.images
        assert cluster.text_data == ""
        assert result.clusters.total_images() == 3

    def test_unreadable_front_is_grouped_by_filename(self) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.return_value = OcrResult(text="", confidence=0.0)

        result = _processor(engine).process(_files())

        assert result.failed == 0
        assert len(result.clusters["john_smith"].images) == 2


class TestProcessorWiring:
    def test_failed_step_runs_when_a_step_raises(self) -> None:
        step = MagicMock()
        step.run.side_effect = RuntimeError("step broke")
        failed_step = MagicMock()
        grouping = MagicMock(spec=GroupingEngine)
        processor = Processor(steps=[step], failed_step=failed_step, grouping_engine=grouping)

        processor.process([ImageFile(filename="a.jpg", content=b"a")])

        failed_step.run.assert_called_once()
        context = failed_step.run.call_args.args[0]
        assert context.error_message == "step broke"
        grouping.group.assert_called_once()

    def test_build_processor_uses_configured_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_ENGINE", "example")
        processor = build_processor(Settings())
        result = processor.process([ImageFile(filename="john_smith_front.jpg", content=b"x")])
        assert result.images[0].status is ProcessingStatus.COMPLETED
        assert result.images[0].identity is None
