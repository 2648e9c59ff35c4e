import asyncio

from pdftext.logging.logger import Log
from pdftext.pdf.base import BasePdfExtractor


class StructuralExtractor:
    """Reads the embedded text layer; parser failures become empty text."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    async def extract(self, pdf_bytes: bytes) -> str:
        """Return the trimmed text layer, or ``""`` if the reader fails.

        A malformed, encrypted or unsupported PDF is not fatal here since
        OCR may still recover text from it.
        """
        try:
            text = await asyncio.to_thread(self._pdf_extractor.extract, pdf_bytes)
        except Exception as exc:
            Log.warning("PDF parse error, continuing with empty text", error=exc)
            return ""
        return text.strip()
