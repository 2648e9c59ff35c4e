import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pdftext.logging.logger import Log
from pdftext.ocr.base import BaseOcrEngine, BaseRasterizer, RasterOptions
from pdftext.ocr.exceptions import OcrExtractionError
from pdftext.ocr.scratch import ScratchArtifacts, scratch_artifacts

T = TypeVar("T")

OCR_FAILED_MESSAGE = "OCR extraction failed"


async def _offload(func: Callable[..., T], *args: object) -> T:
    """Run a blocking call in a worker thread and await it.

    A running thread cannot be interrupted, so on cancellation this waits for
    it to finish before re-raising, absorbing any further cancellation while
    it waits. Any file the thread writes then exists by the time the scratch
    scope cleans up.
    """
    task = asyncio.ensure_future(asyncio.to_thread(func, *args))
    try:
        return await asyncio.shield(task)
    except asyncio.CancelledError:
        while not task.done():
            try:
                await asyncio.wait({task})
            except asyncio.CancelledError:
                continue
        raise


class OcrPipeline:
    """Rasterizes page 1 of a PDF and runs OCR on it.

    Pipeline: write scratch PDF -> rasterize page 1 -> recognize -> cleanup.
    Only the first page is processed; multi-page documents are not iterated.
    """

    def __init__(
        self,
        rasterizer: BaseRasterizer,
        ocr_engine: BaseOcrEngine,
        scratch_dir: Path,
        options: RasterOptions | None = None,
        language: str = "eng",
    ) -> None:
        self._rasterizer = rasterizer
        self._ocr_engine = ocr_engine
        self._scratch_dir = scratch_dir
        self._options = options if options is not None else RasterOptions()
        self._language = language

    async def extract(self, pdf_bytes: bytes) -> str:
        """Return the text recognized on page 1, possibly empty.

        Raises:
            OcrExtractionError: if writing, rasterizing or recognizing fails.
                The message is always ``OCR extraction failed``; the cause is
                chained.
        """
        with scratch_artifacts(self._scratch_dir) as scratch:
            try:
                text = await self._run(pdf_bytes, scratch)
            except Exception as exc:
                Log.error("OCR extraction error", request_id=scratch.request_id, error=exc)
                raise OcrExtractionError(OCR_FAILED_MESSAGE) from exc
        Log.info("OCR finished", request_id=scratch.request_id, chars=len(text))
        return text

    async def _run(self, pdf_bytes: bytes, scratch: ScratchArtifacts) -> str:
        pdf_path = scratch.path(".pdf")
        await _offload(pdf_path.write_bytes, pdf_bytes)

        image_path = scratch.path(f"-page1.{self._options.format}")
        image_path = scratch.track(
            await _offload(self._rasterizer.rasterize, pdf_path, image_path, self._options)
        )

        return await _offload(self._ocr_engine.recognize, image_path, self._language)
