class OcrError(Exception):
    """Base exception for all OCR-related errors."""


class RasterizationError(OcrError):
    """Raised when a PDF page cannot be rendered to an image."""


class RecognitionError(OcrError):
    """Raised when the OCR engine cannot read an image."""


class OcrExtractionError(OcrError):
    """Raised by the OCR pipeline when any of its steps fails."""
