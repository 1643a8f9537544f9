"""Error Hierarchy — typed, categorized exceptions for all Questions API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - message is the user-facing text; no internal details leaked in it
    - to_response() produces the structured REST envelope

Design Decisions:
    - Single hierarchy with QuestionsApiError base: one global handler catches all
    - InvalidIdError maps to 500, not 400: a non-numeric id is reported as a
      server-side failure (kept for compatibility with existing clients)
"""

from dataclasses import dataclass, field
from enum import Enum
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
    INTERNAL = "internal"


class ValidationErrorKind(str, Enum):
    """Why a QuestionId could not be constructed."""
    EMPTY = "empty"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    question_id: str | None = None


class QuestionsApiError(Exception):
    """Base exception for all Questions API errors."""

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
                    "question_id": self.context.question_id,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class QuestionIdValidationError(QuestionsApiError):
    """QuestionId construction rejected its input."""
    def __init__(
        self,
        kind: ValidationErrorKind = ValidationErrorKind.EMPTY,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "No id provided", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.kind = kind


class InvalidIdError(QuestionsApiError):
    """Question id is not an unsigned integer."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Cannot parse id into integer", "INVALID_ID",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 500,
        )


class ResourceNotFoundError(QuestionsApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
