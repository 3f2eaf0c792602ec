"""
Indicator error types.

Every failure is raised before any computation starts, so callers never
receive a partially computed series.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    DATA_EMPTY = "E404"
    VALIDATION_PARAM = "E502"
    UNKNOWN = "E999"


class IndicatorError(Exception):
    """
    Base exception for indicator failures.

    Provides structured error information for callers that surface it.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        indicator: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.code = code
        self.indicator = indicator
        self.context = context or {}

        parts = [f"[{code.value}]"]
        if indicator:
            parts.append(f"[{indicator}]")
        parts.append(message)

        self.message = message
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "indicator": self.indicator,
            "context": self.context,
        }


class InvalidParameter(IndicatorError):
    """Raised when a period, deviation or input value is structurally invalid."""

    def __init__(
        self,
        reason: str,
        field: str,
        value: Any = None,
        indicator: str | None = None,
    ):
        self.field = field
        self.value = value

        context = {"field": field}
        if value is not None:
            context["value"] = str(value)[:50]

        super().__init__(
            message=reason,
            code=ErrorCode.VALIDATION_PARAM,
            indicator=indicator,
            context=context,
        )

    @classmethod
    def non_positive(cls, field: str, value: Any, indicator: str | None = None) -> "InvalidParameter":
        """Create error for a period that must be positive."""
        return cls(
            reason=f"{field} must be positive, got {value}",
            field=field,
            value=value,
            indicator=indicator,
        )


class InsufficientData(InvalidParameter):
    """Raised when the series is too short for even one defined output."""

    def __init__(
        self,
        required: int,
        available: int,
        indicator: str | None = None,
        field: str = "prices",
    ):
        self.required = required
        self.available = available

        super().__init__(
            reason=f"Need at least {required} prices, got {available}",
            field=field,
            value=available,
            indicator=indicator,
        )
        self.code = ErrorCode.DATA_EMPTY
        self.context.update(required=required, available=available)
