"""Error Hierarchy — typed, categorized exceptions for dashboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Infrastructure errors are critical and answer with a 5xx http_status
    - to_response() produces the REST envelope used by the global error handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DashboardError base: FastAPI global handler catches all
    - Form actions never raise these for user mistakes — they return ActionResult
      values; exceptions are reserved for gateways and the HTTP shell
"""

from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    DATABASE = "database"
    INTERNAL = "internal"


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DashboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
