# bookcase/config.py
"""
Application settings.

Values are read from environment variables once, when this module is
first imported.  Set variables before importing anything from
``bookcase`` if you need to override the defaults.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Settings:
    """Settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Bookcase API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "0.1.0"))
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///bookcase.db"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Where the client library talks to by default
    api_url: str = field(default_factory=lambda: os.getenv("BOOKCASE_API_URL", "http://localhost:8000"))

    # Bind address for ``bookcase serve``
    host: str = field(default_factory=lambda: os.getenv("BOOKCASE_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("BOOKCASE_PORT", "8000")))


settings = Settings()
