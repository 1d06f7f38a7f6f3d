"""Ingest exception taxonomy.

The validation engine itself never raises: every structural or geometry
problem is reported through ``ValidationResult.errors``.  The exceptions
below cover the surrounding code that *does* fail loudly, such as an
unknown service-region target or a bad environment setting at startup.

Every domain exception inherits from ``IngestError`` and carries
structured context fields so collectors can log failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``   — input/configuration violations, never retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class IngestError(Exception):
    """Base exception for all ingest-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"bounds"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"UNKNOWN_TARGET"``).
        retryable: Whether the caller may retry the operation.
        context: Source record identifier used for log correlation.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        context: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.context = context
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "context": self.context,
        }


class ValidationError(IngestError):
    """Input or configuration validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
