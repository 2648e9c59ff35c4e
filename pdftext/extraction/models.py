from dataclasses import dataclass, field
from enum import Enum


class Stage(str, Enum):
    STRUCTURAL = "structural"
    OCR = "ocr"


class OutcomeStatus(str, Enum):
    SUCCEEDED = "succeeded"
    PARTIAL = "partial"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractionAttempt:
    """Result of one extraction stage."""

    stage: Stage
    text: str = ""
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ExtractionOutcome:
    """Final result of one extraction request.

    ``text`` is set unless the request failed; ``error`` is set only when it
    failed.
    """

    status: OutcomeStatus
    text: str | None = None
    error: str | None = None
    attempts: tuple[ExtractionAttempt, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.status is OutcomeStatus.FAILED:
            if not self.error or self.text is not None:
                raise ValueError("A failed outcome carries an error and no text")
        elif self.text is None or self.error is not None:
            raise ValueError("A successful outcome carries text and no error")

    @classmethod
    def succeeded(cls, text: str, attempts: tuple[ExtractionAttempt, ...] = ()) -> "ExtractionOutcome":
        return cls(status=OutcomeStatus.SUCCEEDED, text=text, attempts=attempts)

    @classmethod
    def partial(cls, text: str, attempts: tuple[ExtractionAttempt, ...] = ()) -> "ExtractionOutcome":
        return cls(status=OutcomeStatus.PARTIAL, text=text, attempts=attempts)

    @classmethod
    def failed(cls, error: str, attempts: tuple[ExtractionAttempt, ...] = ()) -> "ExtractionOutcome":
        return cls(status=OutcomeStatus.FAILED, error=error, attempts=attempts)

    @property
    def ok(self) -> bool:
        return self.status is not OutcomeStatus.FAILED

    def to_payload(self) -> dict[str, str]:
        """Response body: ``{"text": ...}`` or ``{"error": ...}``."""
        if self.text is not None:
            return {"text": self.text}
        return {"error": self.error or ""}
