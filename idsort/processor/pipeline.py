from abc import ABC, abstractmethod
from dataclasses import dataclass

from idsort.extraction.models import IdentityRecord
from idsort.ocr.models import OcrResult
from idsort.processor.models import ImageRecord


@dataclass(slots=True)
class PipelineContext:
    image: ImageRecord
    ocr_result: OcrResult | None = None
    identity: IdentityRecord | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
