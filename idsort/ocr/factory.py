from idsort.config.settings import Settings
from idsort.ocr.base import BaseOcrEngine
from idsort.ocr.example_adapter import ExampleOcrAdapter
from idsort.ocr.tesseract_adapter import TesseractOcrAdapter


class OcrEngineFactory:
    """Creates the OCR engine adapter selected in settings."""

    ENGINES: tuple[str, ...] = ("tesseract", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        if engine == "tesseract":
            return TesseractOcrAdapter(
                lang=settings.tesseract_lang,
                oem=settings.tesseract_oem,
                psm=settings.tesseract_psm,
            )
        if engine == "example":
            return ExampleOcrAdapter()
        raise ValueError(
            f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
