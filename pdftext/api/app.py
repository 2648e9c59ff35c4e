from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from pdftext.api.routes import router
from pdftext.config.settings import Settings
from pdftext.extraction.orchestrator import ExtractionOrchestrator, build_orchestrator
from pdftext.logging.logger import Log
from pdftext.ocr.scratch import ensure_scratch_dir


def create_app(
    settings: Settings | None = None,
    orchestrator: ExtractionOrchestrator | None = None,
) -> FastAPI:
    """Build the HTTP app. Scratch setup runs once in the lifespan, before serving."""
    settings = settings if settings is not None else Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Log.configure(settings.log_level)
        ensure_scratch_dir(settings.scratch_dir)
        Log.info("PDF text extraction API started")
        yield
        Log.info("PDF text extraction API shutting down")

    app = FastAPI(title="PDF Text Extraction API", lifespan=lifespan)
    app.state.settings = settings
    app.state.orchestrator = (
        orchestrator if orchestrator is not None else build_orchestrator(settings)
    )
    app.include_router(router)
    return app
