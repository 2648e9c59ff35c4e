import io

import pdfplumber

from pdftext.pdf.base import BasePdfExtractor, join_pages
from pdftext.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Reads the PDF text layer with pdfplumber (pdfminer.six underneath).

    pdfminer refuses encrypted documents it cannot open without a password;
    those surface here as ``PdfExtractionError`` like any parse failure.
    """

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return join_pages(page.extract_text() for page in pdf.pages)
        except Exception as exc:
            raise PdfExtractionError(
                f"pdfplumber could not read the text layer: {type(exc).__name__}: {exc}"
            ) from exc
