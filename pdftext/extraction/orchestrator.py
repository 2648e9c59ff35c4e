from pdftext.config.settings import Settings
from pdftext.extraction.models import ExtractionAttempt, ExtractionOutcome, Stage
from pdftext.extraction.quality_gate import MIN_USABLE_LENGTH, is_usable
from pdftext.extraction.structural import StructuralExtractor
from pdftext.logging.logger import Log
from pdftext.ocr.exceptions import OcrExtractionError
from pdftext.ocr.factory import create_ocr_pipeline
from pdftext.ocr.pipeline import OcrPipeline
from pdftext.pdf.factory import create_pdf_extractor

BOTH_STAGES_FAILED_MESSAGE = (
    "Failed to extract text from PDF using both direct extraction and OCR"
)
DEFAULT_ERROR_MESSAGE = "An error occurred while processing the PDF"


class ExtractionOrchestrator:
    """Runs structural extraction and falls back to OCR when it is unusable.

    Pipeline: structural -> quality gate -> (OCR) -> outcome.
    OCR is invoked at most once and only after the gate rejects the
    structural text. Once invoked, successful OCR output wins even when it is
    shorter than the structural text.
    """

    def __init__(
        self,
        structural: StructuralExtractor,
        ocr_pipeline: OcrPipeline,
        min_text_length: int = MIN_USABLE_LENGTH,
    ) -> None:
        self._structural = structural
        self._ocr_pipeline = ocr_pipeline
        self._min_text_length = min_text_length

    async def extract(self, pdf_bytes: bytes) -> ExtractionOutcome:
        """Extract the best available text; never raises except on cancellation."""
        try:
            return await self._extract(pdf_bytes)
        except Exception as exc:
            Log.exception("Processing error", error=exc)
            return ExtractionOutcome.failed(str(exc) or DEFAULT_ERROR_MESSAGE)

    async def _extract(self, pdf_bytes: bytes) -> ExtractionOutcome:
        Log.info("Extracting text", size_bytes=len(pdf_bytes))

        best = await self._structural.extract(pdf_bytes)
        structural = ExtractionAttempt(stage=Stage.STRUCTURAL, text=best)

        if is_usable(best, self._min_text_length):
            Log.info("Direct extraction usable, OCR skipped", chars=len(best))
            return ExtractionOutcome.succeeded(best, attempts=(structural,))

        Log.info("Direct extraction unusable, falling back to OCR", chars=len(best))
        try:
            ocr_text = await self._ocr_pipeline.extract(pdf_bytes)
        except OcrExtractionError as exc:
            ocr = ExtractionAttempt(stage=Stage.OCR, error=str(exc))
            if not best:
                Log.error(BOTH_STAGES_FAILED_MESSAGE)
                return ExtractionOutcome.failed(
                    BOTH_STAGES_FAILED_MESSAGE, attempts=(structural, ocr)
                )
            Log.warning("OCR failed, returning partial direct extraction", chars=len(best))
            return ExtractionOutcome.partial(best, attempts=(structural, ocr))

        ocr = ExtractionAttempt(stage=Stage.OCR, text=ocr_text)
        return ExtractionOutcome.succeeded(ocr_text, attempts=(structural, ocr))


def build_orchestrator(settings: Settings) -> ExtractionOrchestrator:
    """Build an ExtractionOrchestrator with the configured adapters."""
    return ExtractionOrchestrator(
        structural=StructuralExtractor(create_pdf_extractor(settings)),
        ocr_pipeline=create_ocr_pipeline(settings),
        min_text_length=settings.min_text_length,
    )
