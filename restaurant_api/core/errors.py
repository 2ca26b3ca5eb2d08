"""Error Hierarchy: typed, categorized exceptions for all Restaurant API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
      and the HTTP status the global handlers answer with
    - Domain errors (400-level) are detected before any mutating storage call
    - to_response() is the plain-text body sent to clients; no internal details leak

Design Decisions:
    - Single hierarchy with RestaurantApiError base: one FastAPI handler catches all
    - Plain-text bodies over JSON envelopes: clients only receive status + message
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class RestaurantApiError(Exception):
    """Base exception for all Restaurant API errors."""

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

    def to_response(self) -> str:
        """Plain-text body for the HTTP response."""
        return self.message

    def log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RestaurantValidationError(RestaurantApiError):
    """Payload is missing one or more required business fields."""
    def __init__(self, missing: list[str]):
        super().__init__(
            f"Object is incomplete! Missing: {', '.join(missing)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.missing = missing


class RestaurantNotFoundError(RestaurantApiError):
    """No stored restaurant carries the requested name."""
    def __init__(self, name: str):
        super().__init__(
            f"Restaurant '{name}' does not exist",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.name = name


class RestaurantConflictError(RestaurantApiError):
    """Another stored restaurant already carries the name."""
    def __init__(self, name: str):
        super().__init__(
            "Restaurant is already stored!",
            "NAME_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )
        self.name = name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RestaurantApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
        self.detail = message
