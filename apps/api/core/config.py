"""Centralized application configuration via Pydantic Settings.

Loads env vars into a typed Settings instance. The extraction engine itself
takes no configuration; these settings govern the HTTP gateway around it.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # CORS
    ALLOWED_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Comma-separated allowed origins for CORS",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Python log level")
    ENVIRONMENT: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # App
    APP_VERSION: str = Field(default="0.1.0", description="Application version")

    # Extraction policy
    REJECT_ZERO_AMOUNT: bool = Field(
        default=False,
        description="Reject documents whose amount could not be extracted (422) instead of warning",
    )
    DEFAULT_USER: str = Field(default="API User", description="User recorded when the request names none")
    BATCH_MAX_WORKERS: int = Field(default=4, ge=1, description="Thread pool size for batch extraction")
    MAX_TEXT_LENGTH: int = Field(default=100_000, ge=1, description="Largest accepted document text")

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def log_level(self) -> str:
        return self.LOG_LEVEL

    @property
    def json_logs(self) -> bool:
        return self.ENVIRONMENT == "production"

    model_config = {"env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Factory for Settings — allows test override via dependency_overrides."""
    return Settings()


settings = get_settings()
