"""
Configuration helpers for the forum backend.

Exposes a frozen Settings object read from environment variables (database
URL, public base URL, pagination sizes, log level) so that routers/services
do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    public_base_url: str
    log_level: str
    page_size: int
    new_threads_limit: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./forum.db").strip(),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        page_size=max(1, _int(os.getenv("PAGE_SIZE", "20"), 20)),
        new_threads_limit=max(1, _int(os.getenv("NEW_THREADS_LIMIT", "25"), 25)),
    )
