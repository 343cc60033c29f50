"""Database Session Manager — async engine with automatic rollback, health checks and SQL tracing.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - When a statement_sink is given, every executed statement is reported to it once,
      after execution, as one free-text message carrying its own timestamp
    - Sink failures are not caught here: they surface from the query that triggered them

Design Decisions:
    - Singleton db_manager initialized on startup (see main.lifespan)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - statement_sink is a plain Callable[[str], None] so FileLogger.log installs directly,
      the same shape an ORM "log to" hook takes
    - Pool sizing only forwarded when configured: SQLite's pools reject pool_size
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, Callable

from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from northwind.core.errors import DatabaseError

logger = logging.getLogger(__name__)

StatementSink = Callable[[str], None]

# Most specific first: IntegrityError and OperationalError are DBAPIErrors
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
)


def map_sqlalchemy_error(error: SQLAlchemyError) -> tuple[str, str]:
    """(message, operation) for the DatabaseError raised in place of error."""
    for error_type, message, operation in _ERROR_MAP:
        if isinstance(error, error_type):
            return message, operation
    return "Database operation failed", "unknown"


def format_statement(
    statement: str,
    duration_ms: float,
    parameters=None,
    include_parameters: bool = False,
) -> str:
    """Render one executed statement as a trace message."""
    stamp = datetime.now().isoformat(sep=" ", timespec="milliseconds")
    header = f"{stamp} Executed SQL ({duration_ms:.0f}ms)"
    if include_parameters and parameters:
        header += f" [Parameters={parameters!r}]"
    return f"{header}\n{statement}"


def install_statement_sink(
    engine: Engine, sink: StatementSink, include_parameters: bool = False,
) -> None:
    """Report every statement executed on engine to sink.

    The start time lives on the per-statement execution context, so a statement
    that raises (and never reaches after_cursor_execute) leaves nothing behind
    on the pooled connection.
    """

    @event.listens_for(engine, "before_cursor_execute")
    def _start_timer(conn, cursor, statement, parameters, context, executemany):
        context._northwind_query_start = time.perf_counter()

    @event.listens_for(engine, "after_cursor_execute")
    def _report(conn, cursor, statement, parameters, context, executemany):
        started = getattr(context, "_northwind_query_start", time.perf_counter())
        duration_ms = (time.perf_counter() - started) * 1000
        sink(format_statement(
            statement, duration_ms, parameters, include_parameters,
        ))


class DatabaseSessionManager:
    """Manages async database sessions with rollback, health checks and statement tracing."""

    def __init__(
        self,
        database_url: str,
        pool_size: int | None = None,
        max_overflow: int | None = None,
        statement_sink: StatementSink | None = None,
        include_parameters: bool = False,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if pool_size is not None:
            engine_kwargs["pool_size"] = pool_size
        if max_overflow is not None:
            engine_kwargs["max_overflow"] = max_overflow

        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        if statement_sink is not None:
            install_statement_sink(
                self.engine.sync_engine, statement_sink, include_parameters,
            )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            message, operation = map_sqlalchemy_error(e)
            logger.error(f"{message}: {e}")
            raise DatabaseError(message, operation) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None
