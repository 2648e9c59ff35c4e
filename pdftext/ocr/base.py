from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RasterOptions:
    """Rendering parameters for the single page handed to OCR."""

    density: int = 300
    format: str = "png"
    width: int = 2480  # A4 at 300 DPI
    height: int = 3508


class BaseRasterizer(ABC):
    """Contract for adapters that render page 1 of a PDF file to an image."""

    @abstractmethod
    def rasterize(self, pdf_path: Path, output_path: Path, options: RasterOptions) -> Path:
        """Render the first page of ``pdf_path``.

        Args:
            pdf_path: PDF file on disk.
            output_path: Where the image should be written. Adapters may only
                adjust the extension to match the engine's naming.
            options: Density, format and target dimensions.

        Returns:
            Path of the written image.

        Raises:
            RasterizationError: if the page cannot be rendered.
        """


class BaseOcrEngine(ABC):
    """Contract for OCR engine adapters."""

    @abstractmethod
    def recognize(self, image_path: Path, language: str = "eng") -> str:
        """Return the text recognized in the image, possibly empty.

        Raises:
            RecognitionError: if the engine fails.
        """
