"""Error Hierarchy — tests for codes, categories and severities."""

from pathlib import Path

from northwind.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, LogCancelledError,
    LogWriteError, NorthwindError, ResourceNotFoundError, SinkUnavailableError,
)


def test_cancelled_is_distinct_from_sink_failures():
    cancelled = LogCancelledError("/tmp/a.txt")
    unavailable = SinkUnavailableError("/tmp/a.txt", "permission denied")
    failed = LogWriteError("/tmp/a.txt", "disk full")

    assert cancelled.category == ErrorCategory.TIMEOUT
    assert cancelled.severity == ErrorSeverity.WARNING
    assert unavailable.category == failed.category == ErrorCategory.LOG_SINK
    assert {cancelled.code, unavailable.code, failed.code} == {
        "LOG_WRITE_CANCELLED", "LOG_SINK_UNAVAILABLE", "LOG_WRITE_FAILED",
    }


def test_sink_errors_carry_path_and_detail():
    err = SinkUnavailableError("/var/log/x.txt", "permission denied")
    assert err.path == Path("/var/log/x.txt")
    assert "permission denied" in str(err)


def test_cancelled_reason_in_message():
    err = LogCancelledError("/tmp/a.txt", "timed out after 0.5s")
    assert err.reason == "timed out after 0.5s"
    assert "timed out after 0.5s" in err.message


def test_domain_and_database_errors():
    missing = ResourceNotFoundError("Contact", "7")
    db = DatabaseError("Connection or operational error", "execute")

    assert isinstance(missing, NorthwindError)
    assert missing.message == "Contact '7' not found"
    assert db.severity == ErrorSeverity.CRITICAL
    assert db.message.startswith("Database execute failed")
