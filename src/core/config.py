"""Settings for the catalog pipeline, loaded from environment variables.

Flat pydantic-settings model; every field maps to one upper-case variable
(``DATABASE_URL``, ``SLOW_REQUEST_THRESHOLD_MS``, ...). Only
``DATABASE_URL`` is required.

Usage:
    from src.core.config import settings

    Database(settings.database_url, echo=settings.db_echo)
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import SLOW_REQUEST_THRESHOLD_MS, SYSTEM_ACTOR


class Environment(str, Enum):
    """Runtime environment; selects log rendering."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings.

    Precedence: environment variables, then the defaults below.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="development, testing, ci or production",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    app_name: str = Field(default="Catalog", description="Bound into every log line")
    app_version: str = Field(default="0.1.0", description="Bound into every log line")

    # Database
    database_url: str = Field(
        description="SQLAlchemy async URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)",
    )
    db_echo: bool = Field(default=False, description="Log every SQL statement")
    db_pool_size: int = Field(default=20, description="Pooled connections")

    # Request pipeline
    slow_request_threshold_ms: int = Field(
        default=SLOW_REQUEST_THRESHOLD_MS,
        description="Requests slower than this are logged as long running",
    )
    default_page_size: int = Field(default=10, description="Page size when none is given")
    max_page_size: int = Field(default=100, description="Largest page size a list may request")
    system_actor: str = Field(
        default=SYSTEM_ACTOR,
        description="Audit actor recorded when nobody is signed in",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("slow_request_threshold_ms", "default_page_size", "max_page_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Pipeline limits must be greater than zero."""
        if v <= 0:
            raise ValueError("value must be greater than zero")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True for TESTING and CI."""
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()  # type: ignore[call-arg]  # DATABASE_URL comes from env


settings = get_settings()
