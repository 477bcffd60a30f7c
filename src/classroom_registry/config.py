"""Configuration module for the classroom registry service.

This module provides centralized configuration management, including directory
paths, database location and API server settings. All configuration values
can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from classroom_registry.core.exceptions import ConfigurationError

# Load environment variables from .env file (or ENV_FILE if given)
load_dotenv(os.getenv("ENV_FILE", ".env"))

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()

# Data directory, holds the default SQLite database
DATA_DIR_NAME = "data"
DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT_DIR / DATA_DIR_NAME)))

SQLITE_DB_NAME = "classroom_registry.db"

# --- Database Configuration ---

POSTGRES_HOST: Optional[str] = os.getenv("POSTGRES_HOST")


def _postgres_url() -> str:
    """Assemble a PostgreSQL URL from the POSTGRES_* variables.

    Raises:
        ConfigurationError: If a required variable is missing.
    """
    values = {}
    for key in ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB"):
        value = os.getenv(key)
        if value is None:
            raise ConfigurationError(f"Missing env var with key: {key}")
        values[key] = value
    port = os.getenv("POSTGRES_PORT", "5432")
    return (
        f"postgresql+psycopg2://{values['POSTGRES_USER']}:{values['POSTGRES_PASSWORD']}"
        f"@{POSTGRES_HOST}:{port}/{values['POSTGRES_DB']}"
    )


if os.getenv("DATABASE_URL"):
    DATABASE_URL: str = os.environ["DATABASE_URL"]
elif POSTGRES_HOST:
    DATABASE_URL = _postgres_url()
else:
    DATABASE_URL = f"sqlite:///{DATA_DIR / SQLITE_DB_NAME}"

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8080"))

# CORS allowed origins (comma-separated list)
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,"
    "http://127.0.0.1:3000",
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
