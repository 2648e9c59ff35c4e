from fastapi import UploadFile

PDF_MIME_TYPE = "application/pdf"


class UploadValidationError(Exception):
    """Raised when an upload is rejected before it reaches the pipeline."""


async def read_pdf_upload(upload: UploadFile | None, max_bytes: int) -> bytes:
    """Validate the uploaded file and return its bytes.

    Raises:
        UploadValidationError: if no file was sent, it is not a PDF, or it is
            larger than ``max_bytes``.
    """
    if upload is None:
        raise UploadValidationError("No PDF file provided")
    media_type = (upload.content_type or "").split(";", 1)[0].strip().lower()
    if media_type != PDF_MIME_TYPE:
        raise UploadValidationError("Invalid file type. Please upload a PDF file.")
    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise UploadValidationError(f"File size too large. Maximum size is {limit_mb}MB.")
    if not data:
        raise UploadValidationError("No PDF file provided")
    return data
