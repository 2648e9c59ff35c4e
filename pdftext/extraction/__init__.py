from pdftext.extraction.models import ExtractionOutcome, OutcomeStatus
from pdftext.extraction.orchestrator import ExtractionOrchestrator, build_orchestrator
from pdftext.extraction.quality_gate import is_usable

__all__ = [
    "ExtractionOrchestrator",
    "ExtractionOutcome",
    "OutcomeStatus",
    "build_orchestrator",
    "is_usable",
]
