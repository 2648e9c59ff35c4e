from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse

from pdftext.api.uploads import UploadValidationError, read_pdf_upload
from pdftext.extraction.orchestrator import ExtractionOrchestrator
from pdftext.logging.logger import Log

router = APIRouter(prefix="/api")


@router.post("/extract-text")
async def extract_text(
    request: Request,
    pdf: UploadFile | None = File(None),  # noqa: B008
) -> JSONResponse:
    """Return ``{"text": ...}`` for an uploaded PDF, or ``{"error": ...}``."""
    settings = request.app.state.settings
    try:
        pdf_bytes = await read_pdf_upload(pdf, settings.max_upload_bytes)
    except UploadValidationError as exc:
        Log.warning("Rejected upload", reason=exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    orchestrator: ExtractionOrchestrator = request.app.state.orchestrator
    outcome = await orchestrator.extract(pdf_bytes)
    stages = ",".join(
        f"{attempt.stage.value}:{'ok' if attempt.succeeded else 'failed'}"
        for attempt in outcome.attempts
    )
    Log.info("Extraction finished", status=outcome.status.value, stages=stages)
    return JSONResponse(status_code=200 if outcome.ok else 500, content=outcome.to_payload())
