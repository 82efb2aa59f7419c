"""Application configuration and constants."""
import logging
import os
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_log_level(name: str, default: int) -> int:
    """Resolve a logging level name such as ``DEBUG`` from the environment."""
    raw = os.environ.get(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def _parse_list_env(name: str, default: list[str]) -> list[str]:
    """Parse comma separated values from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or default


# Database
DB_DIR = Path(os.environ.get("DB_DIR", Path.cwd() / "data"))
DB_DIR.mkdir(parents=True, exist_ok=True)
DATABASE_URL = os.environ.get(
    "DATABASE_URL", f"sqlite:///{DB_DIR / 'mockexam.db'}"
)

# Logging
LOG_LEVEL = _parse_log_level("LOG_LEVEL", logging.INFO)

# Saved progress
PROGRESS_RETENTION_DAYS = _parse_int_env("PROGRESS_RETENTION_DAYS", 30)
PROGRESS_CLEANUP_INTERVAL_SECONDS = _parse_int_env(
    "PROGRESS_CLEANUP_INTERVAL_SECONDS", 24 * 60 * 60
)

# HTTP
CORS_ORIGINS = _parse_list_env("CORS_ORIGINS", ["*"])
MAX_ANSWER_KEY_BYTES = _parse_int_env("MAX_ANSWER_KEY_BYTES", 1024 * 1024)  # 1 MiB
