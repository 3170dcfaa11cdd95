"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        min_user_age: Minimum age in years a user must have on creation (0-150).
        database_url: Explicit SQLAlchemy URL. Overrides the postgres_* values.
        rate_limit_enabled: Toggle the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Restful Users"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    min_user_age: int = Field(default=18, ge=0, le=150)

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "restful_users"

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    def get_database_url(self) -> str:
        """Return the effective SQLAlchemy URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. PostgreSQL DSN built from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
