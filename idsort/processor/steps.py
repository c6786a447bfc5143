from idsort.extraction.base import BaseFieldExtractor
from idsort.filenames.classifier import DocumentClassifier
from idsort.filenames.roles import Role
from idsort.logging.logger import Log
from idsort.ocr.base import BaseOcrEngine
from idsort.processor.models import ProcessingStatus
from idsort.processor.pipeline import PipelineContext, PipelineStep


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: DocumentClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.image.role is None:
            context.image.assign_role(self._classifier.classify(context.image.filename))
        return context


class MarkProcessingStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.image.mark_processing()
        return context


class RecognizeTextStep(PipelineStep):
    def __init__(
        self,
        ocr_engine: BaseOcrEngine,
        low_confidence_threshold: float = 30.0,
    ) -> None:
        self._ocr_engine = ocr_engine
        self._low_confidence_threshold = low_confidence_threshold

    def run(self, context: PipelineContext) -> PipelineContext:
        image = context.image
        if image.role is not Role.FRONT:
            Log.debug(f"Skipping OCR for {image.role.value if image.role else 'unclassified'}: {image.filename}")
            return context

        result = self._ocr_engine.recognize(image.content)
        context.ocr_result = result
        image.ocr_confidence = result.confidence
        Log.info(
            f"OCR completed for {image.filename}: confidence {result.confidence:.0f}%, "
            f"{len(result.text)} chars"
        )
        if result.confidence < self._low_confidence_threshold:
            Log.warning(
                f"Low confidence OCR result ({result.confidence:.0f}%) for {image.filename}"
            )
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, extractor: BaseFieldExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.ocr_result is None:
            return context

        identity = self._extractor.extract(context.ocr_result.text)
        if identity is None or not identity.is_valid:
            Log.warning(f"No valid data extracted from {context.image.filename}")
            return context

        context.identity = identity
        context.image.assign_identity(identity)
        Log.info(f"Extracted data for {context.image.filename}: {identity.full_name}")
        return context


class MarkCompletedStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.image.mark_completed()
        return context


class MarkFailedStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.image.status is ProcessingStatus.PENDING:
            context.image.mark_processing()
        context.image.mark_failed(context.error_message)
        Log.error(
            f"Image {context.image.filename} marked as failed: {context.error_message}",
            image=context.image.filename,
            status=context.image.status.value,
        )
        return context
