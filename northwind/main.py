"""Application Lifespan — wires logging, the SQL trace file and the database on startup.

Invariants:
    - Logging configured before anything else logs
    - When SQL logging is enabled, FileLogger.log is the engine's statement sink
    - The engine is disposed on exit; the trace file needs no teardown

Design Decisions:
    - Async context manager instead of a web framework lifespan: this package has no
      HTTP surface, callers (scripts, tests, a host app) enter it themselves
    - build_sql_file_logger kept separate so hosts can reuse the configured logger
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from northwind.config import Settings, get_settings
from northwind.infrastructure.database import (
    DatabaseSessionManager, close_db, init_db,
)
from northwind.infrastructure.file_logger import FileLogger, WriteGate
from northwind.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_sql_file_logger(settings: Settings) -> FileLogger | None:
    """FileLogger for SQL trace output, or None when disabled."""
    if not settings.sql_log_enabled:
        return None
    return FileLogger(
        settings.sql_log_path,
        base_dir=settings.sql_log_base_dir,
        gate=None if settings.sql_log_shared_gate else WriteGate(),
        write_through=settings.sql_log_write_through,
    )


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
) -> AsyncGenerator[DatabaseSessionManager, None]:
    """Startup/shutdown lifecycle."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    file_logger = build_sql_file_logger(settings)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        statement_sink=file_logger.log if file_logger else None,
        include_parameters=settings.sql_log_sensitive_data,
    )
    if file_logger:
        logger.info(
            "SQL trace logging enabled",
            extra={"log_path": str(file_logger.path)},
        )
    logger.info("Northwind started")
    try:
        yield manager
    finally:
        await close_db()
        logger.info("Northwind shutting down")
