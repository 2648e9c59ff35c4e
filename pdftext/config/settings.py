import tempfile
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_scratch_dir() -> Path:
    return Path(tempfile.gettempdir()) / "pdftext"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    scratch_dir: Path = Field(default_factory=_default_scratch_dir)
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0)

    min_text_length: int = Field(default=50, ge=0)
    pdf_engine: str = "pdfplumber"

    rasterizer_engine: str = "pdf2image"
    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    ocr_density: int = Field(default=300, gt=0)
    ocr_width: int = Field(default=2480, gt=0)
    ocr_height: int = Field(default=3508, gt=0)
    ocr_format: str = "png"
