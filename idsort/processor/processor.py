from dataclasses import dataclass

from idsort.config.settings import Settings
from idsort.extraction.license_extractor import LicenseFieldExtractor
from idsort.filenames.classifier import DocumentClassifier
from idsort.grouping import ClusterMap, GroupingEngine
from idsort.logging.logger import Log
from idsort.ocr.base import BaseOcrEngine
from idsort.ocr.factory import OcrEngineFactory
from idsort.processor.models import ImageFile, ImageRecord, ProcessingStatus
from idsort.processor.pipeline import PipelineContext, PipelineStep
from idsort.processor.steps import (
    ClassifyStep,
    ExtractFieldsStep,
    MarkCompletedStep,
    MarkFailedStep,
    MarkProcessingStep,
    RecognizeTextStep,
)


@dataclass
class BatchResult:
    """Processed images and the clusters they were grouped into."""

    images: list[ImageRecord]
    clusters: ClusterMap

    @property
    def completed(self) -> int:
        return sum(1 for i in self.images if i.status is ProcessingStatus.COMPLETED)

    @property
    def failed(self) -> int:
        return sum(1 for i in self.images if i.status is ProcessingStatus.FAILED)


class Processor:
    """Runs the per-image steps over a batch, then groups the results.

    Per image: classify -> mark processing -> recognize -> extract -> mark
    completed. A failing step marks that image failed and the batch moves on;
    the image is still grouped by its filename.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        failed_step: PipelineStep,
        grouping_engine: GroupingEngine,
    ) -> None:
        self._steps = steps
        self._failed_step = failed_step
        self._grouping_engine = grouping_engine

    def process(self, files: list[ImageFile]) -> BatchResult:
        Log.info(f"Processing batch of {len(files)} images")
        images = [ImageRecord.from_file(f) for f in files]

        for image in images:
            self._process_image(image)

        clusters = self._grouping_engine.group(images)
        result = BatchResult(images=images, clusters=clusters)
        Log.info(
            f"Batch done: {result.completed} completed, {result.failed} failed, "
            f"{len(clusters)} groups"
        )
        return result

    def _process_image(self, image: ImageRecord) -> None:
        context = PipelineContext(image=image)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc) or exc.__class__.__name__
            self._failed_step.run(context)


def build_processor(
    settings: Settings,
    ocr_engine: BaseOcrEngine | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    engine = ocr_engine if ocr_engine is not None else OcrEngineFactory.create(settings)
    steps: list[PipelineStep] = [
        ClassifyStep(DocumentClassifier()),
        MarkProcessingStep(),
        RecognizeTextStep(
            engine,
            low_confidence_threshold=settings.ocr_low_confidence_threshold,
        ),
        ExtractFieldsStep(LicenseFieldExtractor()),
        MarkCompletedStep(),
    ]
    return Processor(
        steps=steps,
        failed_step=MarkFailedStep(),
        grouping_engine=GroupingEngine(),
    )
