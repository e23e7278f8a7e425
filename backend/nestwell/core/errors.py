"""Error Hierarchy — typed, categorized exceptions for all Nestwell failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are recoverable; data-integrity and infrastructure
      errors (500-level) are critical
    - to_response() produces the REST envelope; no internal details leaked
    - The HTTP boundary dispatches on exception type, never on message text

Design Decisions:
    - Single hierarchy with NestwellError base: one FastAPI handler catches all
    - CodecError is a 500, not a 400: malformed stored text means corruption or schema
      drift upstream, never bad client input
    - SchemaNotFoundError is a programming error: CRITICAL severity, 500 in production
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_INTEGRITY = "data_integrity"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class NestwellError(Exception):
    """Base exception for all Nestwell errors."""

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
                "context": {
                    "entity": self.context.entity,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class RequestValidationFailedError(NestwellError):
    """Request body or query failed schema validation. Carries every field error."""
    def __init__(
        self,
        details: list[dict[str, str]],
        prefix: str = "Validation failed",
        context: ErrorContext | None = None,
    ):
        joined = ", ".join(
            f"{d['path']}: {d['message']}" if d["path"] else d["message"]
            for d in details
        )
        super().__init__(
            f"{prefix}: {joined}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class ResourceNotFoundError(NestwellError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(resource_id=resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Data Integrity & Programming Errors (500-level) ────────────

class CodecError(NestwellError):
    """A serialized column could not be encoded or decoded."""
    def __init__(self, column: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Serialized column '{column}' is malformed: {reason}",
            "CODEC_ERROR", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.column = column
        self.reason = reason


class SchemaNotFoundError(NestwellError):
    """No schema registered for an (entity, operation) pair."""
    def __init__(self, entity: str, operation: str):
        super().__init__(
            f"No schema registered for {entity}/{operation}",
            "SCHEMA_NOT_FOUND", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ErrorContext(entity=entity), 500,
        )
        self.entity = entity
        self.operation = operation


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(NestwellError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
