"""Append-Only File Logger — serializes concurrent writers into one text file.

Invariants:
    - At most one write in flight per WriteGate; all loggers share PROCESS_GATE unless
      given their own gate
    - Each record is the message, a newline, 40 dashes, a newline; nothing else is added
    - The file is opened, written, flushed and closed on every call (never held open)
    - The gate is released on every path, including write failures
    - Cancellation or timeout only applies while waiting for the gate; once the gate is
      held the record is written even if the awaiting task goes away
    - The target path is resolved once, at construction

Design Decisions:
    - threading.Lock polled from the event loop instead of asyncio.Lock: the gate must work
      across event loops and threads (log() may spin up its own loop), and an asyncio.Lock
      is bound to the loop that first uses it
    - The write runs in the default executor and releases the gate there, so a blocked
      event loop thread can never strand the gate
    - Permissive sharing: plain open(..., "a") takes no lock, external tools (tail -f,
      rotation scripts) can read or move the file between calls
    - log() is an adapter over log_async() with the Callable[[str], None] shape expected by
      trace hooks; it never duplicates the write path
"""

import asyncio
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from pathlib import Path

from northwind.core.errors import (
    LogCancelledError, LogWriteError, SinkUnavailableError,
)

logger = logging.getLogger(__name__)

SEPARATOR: str = "-" * 40
DEFAULT_LOG_FOLDER: str = "LogFiles"
DEFAULT_LOG_FILE_NAME: str = "SQL_Log.txt"
GATE_POLL_INTERVAL: float = 0.005


def format_entry(message: str) -> str:
    """Render one record: message line, separator line."""
    return f"{message}\n{SEPARATOR}\n"


def day_folder_name(day: date) -> str:
    """Y-M-D without zero padding, e.g. 2026-3-7."""
    return f"{day.year}-{day.month}-{day.day}"


def default_log_path(base_dir: Path | str | None = None) -> Path:
    """<base_dir>/LogFiles/<Y>-<M>-<D>/SQL_Log.txt for today's local date."""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    return base / DEFAULT_LOG_FOLDER / day_folder_name(date.today()) / DEFAULT_LOG_FILE_NAME


class WriteGate:
    """Mutual-exclusion gate with capacity 1, usable from any thread or event loop."""

    def __init__(self, poll_interval: float = GATE_POLL_INTERVAL):
        self._lock = threading.Lock()
        self._poll_interval = poll_interval

    def locked(self) -> bool:
        return self._lock.locked()

    async def acquire(
        self, path: Path, cancel=None, timeout: float | None = None,
    ) -> None:
        """Wait for the gate without blocking the loop.

        cancel is any object with is_set() (asyncio.Event, threading.Event).
        Raises LogCancelledError if it is set, or timeout elapses, before acquisition.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        while True:
            if cancel is not None and cancel.is_set():
                raise LogCancelledError(path, "cancelled")
            if self._lock.acquire(blocking=False):
                return
            if deadline is not None and loop.time() >= deadline:
                raise LogCancelledError(path, f"timed out after {timeout}s")
            await asyncio.sleep(self._poll_interval)

    def release(self) -> None:
        self._lock.release()


# Shared by every FileLogger that is not given its own gate
PROCESS_GATE = WriteGate()


class FileLogger:
    """Append free-text messages to a single file, one writer at a time."""

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        base_dir: Path | str | None = None,
        gate: WriteGate | None = None,
        write_through: bool = True,
    ):
        self._path = Path(path) if path is not None else default_log_path(base_dir)
        self._gate = gate or PROCESS_GATE
        self._write_through = write_through

    @property
    def path(self) -> Path:
        return self._path

    @property
    def directory(self) -> Path:
        return self._path.parent

    @property
    def gate(self) -> WriteGate:
        return self._gate

    async def log_async(
        self, message: str, *, cancel=None, timeout: float | None = None,
    ) -> None:
        """Append one record. Errors propagate after the gate is released."""
        self._ensure_directory()

        await self._gate.acquire(self._path, cancel=cancel, timeout=timeout)
        try:
            write = asyncio.get_running_loop().run_in_executor(
                None, self._append_and_release, message,
            )
        except BaseException:
            self._gate.release()
            raise
        await write

    def log(self, message: str) -> None:
        """Blocking adapter for synchronous string-sink callbacks."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self.log_async(message))
            return
        # Already inside a running loop (e.g. an async ORM hook): a nested
        # asyncio.run() is not allowed, so drive a private loop on a helper thread
        with ThreadPoolExecutor(max_workers=1) as pool:
            pool.submit(asyncio.run, self.log_async(message)).result()

    def _ensure_directory(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(
                f"Cannot create log directory: {e}",
                extra={"log_path": str(self._path), "error_code": "LOG_SINK_UNAVAILABLE"},
            )
            raise SinkUnavailableError(self._path, str(e)) from e

    def _append_and_release(self, message: str) -> None:
        """Executor side of log_async: must be entered with the gate held."""
        try:
            self._append(message)
        finally:
            self._gate.release()

    def _append(self, message: str) -> None:
        try:
            handle = open(self._path, "a", encoding="utf-8", newline="\n")
        except OSError as e:
            logger.error(
                f"Cannot open log file: {e}",
                extra={"log_path": str(self._path), "error_code": "LOG_SINK_UNAVAILABLE"},
            )
            raise SinkUnavailableError(self._path, str(e)) from e

        try:
            with handle:
                handle.write(format_entry(message))
                handle.flush()
                if self._write_through:
                    os.fsync(handle.fileno())
        except OSError as e:
            logger.error(
                f"Log write failed: {e}",
                extra={"log_path": str(self._path), "error_code": "LOG_WRITE_FAILED"},
            )
            raise LogWriteError(self._path, str(e)) from e
