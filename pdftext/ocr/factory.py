from pdftext.config.settings import Settings
from pdftext.ocr.base import BaseOcrEngine, BaseRasterizer, RasterOptions
from pdftext.ocr.pdf2image_rasterizer import Pdf2ImageRasterizer
from pdftext.ocr.pipeline import OcrPipeline
from pdftext.ocr.pymupdf_rasterizer import PyMuPdfRasterizer
from pdftext.ocr.tesseract_engine import TesseractEngine
from pdftext.registry import AdapterRegistry

RASTERIZERS: AdapterRegistry[BaseRasterizer] = AdapterRegistry(
    "rasterizer",
    {
        "pdf2image": Pdf2ImageRasterizer,
        "pymupdf": PyMuPdfRasterizer,
    },
)

OCR_ENGINES: AdapterRegistry[BaseOcrEngine] = AdapterRegistry(
    "OCR",
    {"tesseract": TesseractEngine},
)


def create_ocr_pipeline(settings: Settings) -> OcrPipeline:
    """Create the OCR pipeline with the rasterizer and engine from settings."""
    return OcrPipeline(
        rasterizer=RASTERIZERS.create(settings.rasterizer_engine),
        ocr_engine=OCR_ENGINES.create(settings.ocr_engine),
        scratch_dir=settings.scratch_dir,
        options=RasterOptions(
            density=settings.ocr_density,
            format=settings.ocr_format.lower(),
            width=settings.ocr_width,
            height=settings.ocr_height,
        ),
        language=settings.ocr_language,
    )
