"""Root conftest — shared test configuration."""

import os

import pytest

# Ensure tests never touch a real database or drop trace files in the repo
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SQL_LOG_ENABLED", "false")


@pytest.fixture
def log_path(tmp_path):
    """Target file inside a directory that does not exist yet."""
    return tmp_path / "logs" / "nested" / "SQL_Log.txt"
