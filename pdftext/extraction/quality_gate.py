MIN_USABLE_LENGTH = 50


def is_usable(text: str, min_length: int = MIN_USABLE_LENGTH) -> bool:
    """Decide whether structurally extracted text can be returned as is.

    Very short text usually means a scanned page whose text layer only holds
    page numbers or watermarks, in which case OCR should be tried.
    """
    stripped = text.strip()
    return bool(stripped) and len(stripped) >= min_length
