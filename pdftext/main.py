import uvicorn

from pdftext.api.app import create_app
from pdftext.config.settings import Settings
from pdftext.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info("PDF Text Extraction API starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
