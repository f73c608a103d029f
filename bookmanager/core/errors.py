"""Error Hierarchy: typed, categorized exceptions raised at the API boundary.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business-rule errors are client errors (400); infrastructure errors are 5xx
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookManagerError base: FastAPI global handler catches all
    - Managers never raise these: they return core.outcome.Failure values and the
      API layer converts them here via Failure.to_error()
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    details: dict[str, Any] | None = None


class BookManagerError(Exception):
    """Base exception for all book manager errors."""

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
                "details": self.context.details or {},
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundOrInvalidError(BookManagerError):
    """Referenced author or book does not exist."""
    def __init__(
        self,
        resource_type: str,
        identifiers: list[int],
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.details = {"ids": list(identifiers)}
        if identifiers:
            message = f"{resource_type} does not exist: id={_format_ids(identifiers)}"
        else:
            message = f"At least one {resource_type.lower()} is required"
        super().__init__(
            message, "NOT_FOUND_OR_INVALID", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.resource_type = resource_type
        self.identifiers = list(identifiers)


class IllegalTransitionError(BookManagerError):
    """Requested a forbidden published_status change."""
    def __init__(
        self, current: str, requested: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.details = {"publishedStatus": f"{current} -> {requested}"}
        super().__init__(
            "A published book cannot be changed back to unpublished",
            "ILLEGAL_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.current = current
        self.requested = requested


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookManagerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


def _format_ids(identifiers: list[int]) -> str:
    if len(identifiers) == 1:
        return str(identifiers[0])
    return "[" + ", ".join(str(i) for i in identifiers) + "]"
