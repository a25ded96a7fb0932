"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field except
the JWT private key, which must be supplied before the application
starts (see ``check_settings``).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Vidly API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("APP_ENV", "development")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # Secret used to sign authentication tokens.  There is deliberately
    # no default: ``check_settings`` refuses to start without it.
    jwt_private_key: str = os.getenv("JWT_PRIVATE_KEY", "")
    algorithm: str = os.getenv("ALGORITHM", "HS256")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # MongoDB connection string and database name.
    database_url: str = os.getenv("DATABASE_URL", "mongodb://localhost:27017")
    database_name: str = os.getenv("DATABASE_NAME", "vidly")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def check_settings(current: "Settings") -> None:
    """Fail fast when mandatory settings are missing."""
    if not current.jwt_private_key:
        raise RuntimeError("FATAL ERROR: jwt_private_key is not defined.")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
