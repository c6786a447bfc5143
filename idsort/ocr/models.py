from dataclasses import dataclass


@dataclass(frozen=True)
class OcrResult:
    """Recognized text of one image and the engine's confidence (0-100)."""

    text: str
    confidence: float = 0.0
