"""
Simple configuration management.

To avoid a dependency on the ``pydantic_settings`` package, the
``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is created, so tests can adjust
    the environment and build a fresh ``Settings()``.
    """

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Soccer Results API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When unset only the console handler
    # is configured.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    log_max_bytes: int = field(default_factory=lambda: int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024))))
    log_backup_count: int = field(default_factory=lambda: int(os.getenv("LOG_BACKUP_COUNT", "5")))

    # Path of the SQLite database file.  A relative path is resolved
    # against the project root by ``core.db.get_database_path``.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "soccer_results.db"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin, which is what browser dashboards of the
    # previous service relied on.
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
