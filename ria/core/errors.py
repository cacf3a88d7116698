"""Error Hierarchy: typed, categorized exceptions for all Ria failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - All malformed-input errors share code INVALID_FORMAT and one user-facing message;
      the distinguishing `kind` goes to logs and the envelope's `kind` field
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with RiaError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


INVALID_FORMAT_MESSAGE = "올바른 포맷으로 입력해주세요!"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    rule_id: int | None = None
    mode: str | None = None
    user_message: str | None = None


class RiaError(Exception):
    """Base exception for all Ria errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "rule_id": self.context.rule_id,
                    "mode": self.context.mode,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidSubmissionError(RiaError):
    """Submitted answer text cannot be evaluated."""

    kind: str = "invalid_submission"

    def __init__(self, detail: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = INVALID_FORMAT_MESSAGE
        super().__init__(
            detail, "INVALID_FORMAT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.detail = detail

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["kind"] = self.kind
        return response


class EmptyInputError(InvalidSubmissionError):
    """Both the rule field and the sequence field are blank."""
    kind = "empty_input"

    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Both answer fields are blank", context)


class MalformedSubmissionError(InvalidSubmissionError):
    """Submission does not match `<number>:<answer>`."""
    kind = "malformed_submission"

    def __init__(self, raw: str, context: ErrorContext | None = None):
        super().__init__(f"Not a '<number>:<answer>' submission: {raw!r}", context)
        self.raw = raw


class MalformedSequenceError(InvalidSubmissionError):
    """A sequence token is not an integer."""
    kind = "malformed_sequence"

    def __init__(self, token: str, context: ErrorContext | None = None):
        super().__init__(f"Sequence token is not an integer: {token!r}", context)
        self.token = token


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RiaError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
