"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration at all.  Override them
via environment variables before importing this module.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Cinema API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON document holding every collection.  A relative
    # path is resolved against the project root by the ``db`` module.
    database_path: str = os.getenv("DATABASE_PATH", "db.json")

    # Length of generated record identifiers.
    id_length: int = int(os.getenv("ID_LENGTH", "8"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
