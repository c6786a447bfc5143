"""Offline OCR adapter.

Use this module as a reference when implementing new engine adapters.
Implement BaseOcrEngine and register the engine in OcrEngineFactory.
"""

from collections.abc import Mapping

from idsort.ocr.base import BaseOcrEngine
from idsort.ocr.models import OcrResult


class ExampleOcrAdapter(BaseOcrEngine):
    """Returns canned text for known image payloads, empty text otherwise.

    No OCR engine required. Useful for local development and tests.
    """

    def __init__(self, responses: Mapping[bytes, str] | None = None) -> None:
        self._responses = dict(responses or {})

    def recognize(self, image_bytes: bytes) -> OcrResult:
        text = self._responses.get(image_bytes)
        if text is None:
            return OcrResult(text="", confidence=0.0)
        return OcrResult(text=text, confidence=100.0)
