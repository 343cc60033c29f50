"""Structured Logging — JSON formatter and setup for application diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (log_path, error_code, contact_id, duration_ms) surfaced when present
    - JSON format by default, human-readable text on request

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Separate from the SQL file logger: that one is a plain-text sink for trace output,
      this one configures the stdlib logging tree
    - setup_logging replaces the handler it installed before, so repeated calls
      (tests, reloads) don't stack handlers
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("log_path", "error_code", "contact_id", "duration_ms")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    handler._northwind_managed = True  # type: ignore[attr-defined]
    logging.root.handlers = [
        h for h in logging.root.handlers
        if not getattr(h, "_northwind_managed", False)
    ]
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
