"""Error Hierarchy — typed, categorized exceptions for every NBA API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status decides the response status; the response body is always empty
    - No driver exception escapes the store boundary untranslated

Design Decisions:
    - Single hierarchy with NbaApiError base: one FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    database: str | None = None
    collection: str | None = None
    debug_info: dict[str, Any] | None = None


class NbaApiError(Exception):
    """Base exception for all NBA API errors."""

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

    def log_extra(self) -> dict:
        """Fields passed as `extra=` when the error is logged."""
        extra = {"error_code": self.code}
        if self.context.database:
            extra["database"] = self.context.database
        if self.context.collection:
            extra["collection"] = self.context.collection
        return extra


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(NbaApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    def log_extra(self) -> dict:
        extra = super().log_extra()
        extra["operation"] = self.operation
        return extra
