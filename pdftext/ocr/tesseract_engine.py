from pathlib import Path

import pytesseract
from PIL import Image

from pdftext.ocr.base import BaseOcrEngine
from pdftext.ocr.exceptions import RecognitionError


class TesseractEngine(BaseOcrEngine):
    """OCR through the Tesseract binary via pytesseract.

    Every call spawns its own tesseract process, so no engine state outlives
    a single recognition.
    """

    def recognize(self, image_path: Path, language: str = "eng") -> str:
        try:
            with Image.open(image_path) as image:
                return pytesseract.image_to_string(image, lang=language)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise RecognitionError(f"tesseract failed: {exc}") from exc
        except OSError as exc:
            raise RecognitionError(f"cannot open image {image_path.name}: {exc}") from exc
