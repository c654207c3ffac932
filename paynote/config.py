"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode secrets or connection strings in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "PayNote"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./paynote.db"
    )

    # Sessions
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SESSION_COOKIE: str = os.getenv("SESSION_COOKIE", "paynote_session")
    SESSION_MAX_AGE: int = int(os.getenv("SESSION_MAX_AGE", str(14 * 24 * 3600)))
    SESSION_HTTPS_ONLY: bool = (
        os.getenv("SESSION_HTTPS_ONLY", "false").lower() == "true"
    )

    # Dashboard shows only the most recent notes
    DASHBOARD_PAGE_SIZE: int = int(os.getenv("DASHBOARD_PAGE_SIZE", "50"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused for all
    subsequent calls.
    """
    return Settings()
