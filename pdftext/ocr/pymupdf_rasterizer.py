from pathlib import Path

import pymupdf

from pdftext.ocr.base import BaseRasterizer, RasterOptions
from pdftext.ocr.exceptions import RasterizationError


class PyMuPdfRasterizer(BaseRasterizer):
    """Renders page 1 with PyMuPDF, scaled to the target dimensions."""

    def rasterize(self, pdf_path: Path, output_path: Path, options: RasterOptions) -> Path:
        try:
            with pymupdf.open(str(pdf_path)) as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise RasterizationError(f"{pdf_path.name} has no pages")
                page = doc[0]
                matrix = pymupdf.Matrix(
                    options.width / page.rect.width,
                    options.height / page.rect.height,
                )
                pixmap = page.get_pixmap(matrix=matrix)
                pixmap.set_dpi(options.density, options.density)
                pixmap.save(str(output_path), output=options.format)
        except RasterizationError:
            raise
        except Exception as exc:
            raise RasterizationError(f"pymupdf rendering failed: {exc}") from exc
        return output_path
