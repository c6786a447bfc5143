"""OCR engine backed by pytesseract.

Uses the LSTM engine (``--oem 3``) with automatic page segmentation
(``--psm 3``) by default. Word-level confidences from ``image_to_data`` are
averaged into the result confidence.
"""

import io
from statistics import mean
from typing import ClassVar

import pytesseract
from PIL import Image
from pytesseract import Output

from idsort.ocr.base import BaseOcrEngine
from idsort.ocr.exceptions import OcrError
from idsort.ocr.models import OcrResult


class TesseractOcrAdapter(BaseOcrEngine):
    """Recognizes text with a local Tesseract installation.

    Args:
        lang: Language hint passed to Tesseract (e.g. ``"eng"``).
        oem: OCR Engine Mode.
        psm: Page segmentation mode.
    """

    # Characters printed on US licenses; anything else is OCR noise.
    CHAR_WHITELIST: ClassVar[str] = (
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789 /-.,:()"
    )

    def __init__(self, lang: str = "eng", oem: int = 3, psm: int = 3) -> None:
        self._lang = lang
        # Quoted: pytesseract splits the config with shlex.
        self._config = (
            f"--oem {oem} --psm {psm} -c preserve_interword_spaces=1 "
            f"-c \"tessedit_char_whitelist={self.CHAR_WHITELIST}\""
        )

    def recognize(self, image_bytes: bytes) -> OcrResult:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                data = pytesseract.image_to_data(
                    image.convert("RGB"),
                    lang=self._lang,
                    config=self._config,
                    output_type=Output.DICT,
                )
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return self._to_result(data)

    def _to_result(self, data: dict[str, list[object]]) -> OcrResult:
        lines: dict[tuple[object, object, object], list[str]] = {}
        confidences: list[float] = []

        for word, conf, block, par, line in zip(
            data.get("text", []),
            data.get("conf", []),
            data.get("block_num", []),
            data.get("par_num", []),
            data.get("line_num", []),
        ):
            text = str(word).strip()
            if not text or conf is None or float(str(conf)) < 0:
                continue
            lines.setdefault((block, par, line), []).append(text)
            confidences.append(float(str(conf)))

        text_content = "\n".join(" ".join(words) for words in lines.values())
        return OcrResult(
            text=text_content,
            confidence=mean(confidences) if confidences else 0.0,
        )
