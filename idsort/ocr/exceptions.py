class OcrError(Exception):
    """Raised when text recognition fails for an image."""
