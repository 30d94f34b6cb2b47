"""Error Hierarchy — typed, categorized exceptions raised by the shell.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are recoverable; infrastructure errors (5xx) are critical
    - to_response() produces the REST envelope
    - The pure parser never raises these; it returns InvalidId values

Design Decisions:
    - Single hierarchy with IdCardError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from idcard.core.invalid_id import InvalidId


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_SOURCE = "data_source"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    details: dict[str, Any] | None = None


class IdCardError(Exception):
    """Base exception for all idcard shell errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "details": self.context.details,
            }
        }


# ─── Domain Errors (4xx) ────────────────────────────────────────

class InvalidIdentityNumberError(IdCardError):
    """Identity number rejected by the parser."""
    def __init__(self, invalid: InvalidId, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.details = {"kind": invalid.kind.value, "payload": invalid.payload}
        super().__init__(
            invalid.message, "INVALID_IDENTITY_NUMBER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 422,
        )
        self.invalid = invalid


class ResourceNotFoundError(IdCardError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DivisionDataError(IdCardError):
    """Division dataset missing or malformed."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        super().__init__(
            f"Division data {source} unusable: {message}",
            "DIVISION_DATA_ERROR", ErrorCategory.DATA_SOURCE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.source = source
