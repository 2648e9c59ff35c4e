from abc import ABC, abstractmethod
from collections.abc import Iterable


def join_pages(page_texts: Iterable[str | None]) -> str:
    """Join trimmed per-page text, skipping pages whose text layer is blank."""
    return "\n".join(text.strip() for text in page_texts if text and text.strip())


class BasePdfExtractor(ABC):
    """Contract for all PDF text-layer adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the embedded text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text as a single stripped string. Empty when the
            document has no text layer.

        Raises:
            PdfExtractionError: if the document is malformed, encrypted or
                otherwise unreadable.
        """
