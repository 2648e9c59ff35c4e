import io
import shutil

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def _require_binary(name: str) -> None:
    if shutil.which(name) is None:
        pytest.skip(f"{name} not installed; see pdf2image / pytesseract docs")


@pytest.fixture()
def ocr_binaries() -> None:
    _require_binary("pdftoppm")
    _require_binary("pdfinfo")
    _require_binary("tesseract")


@pytest.fixture()
def large_print_pdf_bytes() -> bytes:
    """Two pages of large text; OCR only ever sees the first one."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setFont("Helvetica", 48)
    c.drawString(72, 700, "Receipt")
    c.showPage()
    c.setFont("Helvetica", 48)
    c.drawString(72, 700, "Appendix")
    c.save()
    return buf.getvalue()
