"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API and the clients work out of the box against a local server.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Contact Manager API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file that receives a copy of every log record.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the uvicorn server binds to (see ``run.py``).
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Origin of the web front end.  It is the only origin allowed by the
    # CORS middleware and credentials are permitted for it.
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:5173")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "contacts.db")

    # Base URL of the contacts resource, consumed by ``contacts_client``.
    api_url: str = os.getenv("API_URL", "http://localhost:5000/api/contacts")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
