from abc import ABC, abstractmethod

from idsort.ocr.models import OcrResult


class BaseOcrEngine(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> OcrResult:
        """Recognize text in an encoded image.

        Args:
            image_bytes: Raw image file content (PNG, JPEG, ...).

        Returns:
            OcrResult with the recognized text and a 0-100 confidence.

        Raises:
            OcrError: if recognition fails for any reason.
        """
