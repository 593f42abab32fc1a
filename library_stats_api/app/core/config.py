"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts against the bundled sample catalog without any setup.
"""

import os
from dataclasses import dataclass


def env_limit(name: str, default: int) -> int:
    """Read a non-negative integer limit; negative values become 0."""
    return max(0, int(os.getenv(name, str(default))))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Library Stats API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Directory holding ``accounts.json``, ``books.json`` and
    # ``authors.json``.  Relative paths are resolved against the
    # project root by ``core.catalog``.
    data_dir: str = os.getenv("DATA_DIR", "data")

    # Length of the home page rankings and of the borrower list on the
    # book page.
    ranking_limit: int = env_limit("RANKING_LIMIT", 5)
    borrowers_limit: int = env_limit("BORROWERS_LIMIT", 10)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
