"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - SQL trace logging is on by default and writes under the working directory

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: a local SQLite file works out-of-the-box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./northwind.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    # Only passed to the engine when set (SQLite pools reject them)
    database_pool_size: int | None = None
    database_max_overflow: int | None = None

    # SQL trace file
    sql_log_enabled: bool = True
    sql_log_path: str | None = None
    sql_log_base_dir: str | None = None
    sql_log_sensitive_data: bool = False
    sql_log_write_through: bool = True
    # False gives the SQL logger its own gate instead of the process-wide one
    sql_log_shared_gate: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
