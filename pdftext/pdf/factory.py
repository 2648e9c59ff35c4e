from pdftext.config.settings import Settings
from pdftext.pdf.base import BasePdfExtractor
from pdftext.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdftext.pdf.pymupdf_adapter import PyMuPdfAdapter
from pdftext.registry import AdapterRegistry

PDF_EXTRACTORS: AdapterRegistry[BasePdfExtractor] = AdapterRegistry(
    "PDF",
    {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    },
)


def create_pdf_extractor(settings: Settings) -> BasePdfExtractor:
    """Create the text-layer reader selected by ``PDF_ENGINE``."""
    return PDF_EXTRACTORS.create(settings.pdf_engine)
