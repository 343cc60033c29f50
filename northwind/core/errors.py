"""Error Hierarchy — typed, categorized exceptions for all Northwind failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Log sink errors carry the target path; the underlying OSError is chained
    - Cancellation before the write gate is acquired is distinct from a broken sink

Design Decisions:
    - Single hierarchy with NorthwindError base: callers can catch one type (ADR: uniform error shape)
    - LogCancelledError is NOT an asyncio.CancelledError: task cancellation keeps its own
      semantics, this one reports "gave up waiting for the gate"
"""

from enum import Enum
from pathlib import Path


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    LOG_SINK = "log_sink"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


class NorthwindError(Exception):
    """Base exception for all Northwind errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity


# ─── Domain Errors ──────────────────────────────────────────────

class ResourceNotFoundError(NorthwindError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(NorthwindError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL,
        )
        self.operation = operation


class LogSinkError(NorthwindError):
    """Base for failures of the append-only file logger."""
    def __init__(
        self,
        message: str,
        code: str,
        path: Path | str,
        category: ErrorCategory = ErrorCategory.LOG_SINK,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(message, code, category, severity)
        self.path = Path(path)


class LogCancelledError(LogSinkError):
    """Caller stopped waiting for the write gate; nothing was written."""
    def __init__(self, path: Path | str, reason: str = "cancelled"):
        super().__init__(
            f"Log write to '{path}' {reason} before the write gate was acquired",
            "LOG_WRITE_CANCELLED", path,
            ErrorCategory.TIMEOUT, ErrorSeverity.WARNING,
        )
        self.reason = reason


class SinkUnavailableError(LogSinkError):
    """Log directory could not be created or the file could not be opened."""
    def __init__(self, path: Path | str, detail: str):
        super().__init__(
            f"Log sink '{path}' unavailable: {detail}",
            "LOG_SINK_UNAVAILABLE", path,
            severity=ErrorSeverity.CRITICAL,
        )


class LogWriteError(LogSinkError):
    """Log file was opened but writing or flushing failed."""
    def __init__(self, path: Path | str, detail: str):
        super().__init__(
            f"Write to log sink '{path}' failed: {detail}",
            "LOG_WRITE_FAILED", path,
            severity=ErrorSeverity.CRITICAL,
        )
