import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from pdftext.config.settings import Settings

LONG_TEXT = "Hello world, this is a long paragraph exceeding fifty characters easily."


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def long_text_pdf_bytes() -> bytes:
    """Generate a single-page PDF whose text layer passes the quality gate."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, LONG_TEXT)
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def scratch_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "scratch"
    directory.mkdir()
    return directory


@pytest.fixture()
def settings(scratch_dir: Path) -> Settings:
    return Settings(scratch_dir=scratch_dir)


@pytest.fixture()
def encrypted_pdf_bytes() -> bytes:
    """Generate a PDF that cannot be opened without the user password."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, encrypt="s3cret")
    c.drawString(72, 720, "Confidential statement")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def gap_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF whose middle page has no text layer."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Cover letter")
    c.showPage()
    c.showPage()
    c.drawString(72, 720, "Signature page")
    c.save()
    return buf.getvalue()
