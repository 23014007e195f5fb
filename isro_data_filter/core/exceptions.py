"""Unified exception taxonomy for the data filter.

Every domain exception inherits from ``FilterError`` and carries
structured context fields so that callers (the controller, a UI layer,
a log sink) can decide how to surface a failure without inspecting
message text.

Taxonomy categories
-------------------
- ``ValidationError``: user-correctable input problems, never retryable.
- ``TransientError``: temporary failures (network, server), retryable.
- anything else that is not retryable is reported as ``"permanent"``.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class FilterError(Exception):
    """Base exception for all data-filter errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"build_query"``, ``"execute_query"``).
        code: Machine-readable error code (e.g. ``"AOI_INCOMPLETE"``).
        retryable: Whether the user may simply try the operation again.
        correlation_id: Request correlation identifier.
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
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(FilterError):
    """Input validation failure. Never retryable.

    Attributes:
        user_message: Text suitable for showing to the user as-is.
    """

    def __init__(self, message: str = "", *, user_message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        self.user_message = user_message or message
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(FilterError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


