"""
Configuration management for the Firearms Catalog API.

Values can be overridden through environment variables or a .env file at the
repository root.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

BASE_DIR: Path = Path(__file__).parent.parent
load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """API server configuration."""

    # Paths
    BASE_DIR: Path = BASE_DIR
    DB_PATH: str = os.getenv("FIREARMS_DB_PATH", str(BASE_DIR / "data" / "gundatabase.db"))
    TEMPLATES_DIR: str = str(BASE_DIR / "templates")
    STATIC_DIR: str = str(BASE_DIR / "static")

    # Server
    API_TITLE: str = "Firearms Catalog API"
    API_DESCRIPTION: str = "Read-only lookup service for firearm specification records"
    API_VERSION: str = "1.0.0"
    HOST: str = os.getenv("FIREARMS_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("FIREARMS_PORT", "4000"))

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Database
    SEED_ON_STARTUP: bool = _env_bool("FIREARMS_SEED_ON_STARTUP", True)

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not hasattr(type(self), key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)


settings = Settings()
