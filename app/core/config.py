"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables (and .env)
- Centralizes config values (store URL, access key, CORS origin, etc.)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Required store settings are checked by validate_settings() at startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Bind host for uvicorn"
    )
    PORT: int = Field(
        default=3001,
        description="HTTP port"
    )
    FRONTEND_URL: str = Field(
        default="http://localhost:3000",
        description="Only origin allowed by CORS"
    )

    # Supabase (managed Postgres behind PostgREST)
    SUPABASE_URL: Optional[str] = Field(
        default=None,
        description="Supabase project URL, e.g. https://xyz.supabase.co"
    )
    SUPABASE_ANON_KEY: Optional[str] = Field(
        default=None,
        description="Supabase anon/service key sent with every store request"
    )
    DATABASE_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Store request timeout in seconds (None disables it)"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    SLOW_REQUEST_SECONDS: float = Field(
        default=5.0,
        description="Requests slower than this are logged as warnings"
    )

    @field_validator("SUPABASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the project URL so paths can be appended safely."""
        if v:
            return v.rstrip("/")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    config = config or settings
    errors = []

    if not config.SUPABASE_URL:
        errors.append("SUPABASE_URL is required")

    if not config.SUPABASE_ANON_KEY:
        errors.append("SUPABASE_ANON_KEY is required")

    if config.DATABASE_TIMEOUT is not None and config.DATABASE_TIMEOUT <= 0:
        errors.append("DATABASE_TIMEOUT must be positive when set")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
