from pathlib import Path

from pdf2image import convert_from_path

from pdftext.ocr.base import BaseRasterizer, RasterOptions
from pdftext.ocr.exceptions import RasterizationError


class Pdf2ImageRasterizer(BaseRasterizer):
    """Renders page 1 with poppler's pdftoppm through pdf2image."""

    def rasterize(self, pdf_path: Path, output_path: Path, options: RasterOptions) -> Path:
        try:
            paths = convert_from_path(
                str(pdf_path),
                dpi=options.density,
                fmt=options.format,
                size=(options.width, options.height),
                first_page=1,
                last_page=1,
                output_folder=str(output_path.parent),
                output_file=output_path.stem,
                single_file=True,
                paths_only=True,
            )
        except Exception as exc:
            raise RasterizationError(f"pdf2image conversion failed: {exc}") from exc
        if not paths:
            raise RasterizationError(f"pdf2image produced no image for {pdf_path.name}")
        return Path(paths[0])
