from abc import ABC, abstractmethod

from idsort.extraction.models import IdentityRecord


class BaseFieldExtractor(ABC):
    """Contract for all identity field extractors."""

    @abstractmethod
    def extract(self, raw_text: str) -> IdentityRecord | None:
        """Parse recognized document text into an identity record.

        Args:
            raw_text: Text returned by the OCR engine for a front image.

        Returns:
            IdentityRecord with both names present, or None when no
            confident name pair was found. Never raises.
        """
