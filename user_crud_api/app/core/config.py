"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration at all.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User CRUD API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed by ``setup_logging``.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite database file.  A relative path is resolved
    # against the project root by ``core.db.get_database_path``.
    database_url: str = os.getenv("DATABASE_URL", "user_crud.db")


# Environment variables must be set before this module is imported;
# the values are captured once when the dataclass is instantiated.
settings = Settings()
