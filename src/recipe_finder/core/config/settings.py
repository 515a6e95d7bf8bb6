"""Service settings: pydantic-settings over layered YAML files.

Each top-level section (app, server, api, logging, observability, mealdb,
cache, search) is a plain pydantic model filled from
``config/base/*.yaml``, then ``config/environments/{APP_ENV}/*.yaml``, then
environment variables such as ``MEALDB__PREFERRED_AREA=Thai``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, BeforeValidator, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


def parse_list(v: str | list[str]) -> list[str]:
    """Parse comma-separated string or list into list of strings."""
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    return v


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Service name and version reported by the root and health endpoints."""

    name: str = "Recipe Finder Service"
    version: str = "2.0.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Bind address for the uvicorn entry point."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """Route prefix and allowed CORS origins."""

    v1_prefix: str = "/api/v1/recipe-finder"
    cors_origins: Annotated[list[str], BeforeValidator(parse_list)] = []


class LoggingSettings(BaseModel):
    """Log level and output format."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "json"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class MetricsSettings(BaseModel):
    """Prometheus exposition toggle."""

    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Observability settings."""

    metrics: MetricsSettings = MetricsSettings()


class MealDbSettings(BaseModel):
    """Remote recipe gateway configuration."""

    base_url: str = "https://www.themealdb.com/api/json/v1/1"
    # None leaves requests without a client-side deadline
    timeout: float | None = Field(default=None, gt=0)
    preferred_area: str = Field(default="Indian", min_length=1)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class CacheSettings(BaseModel):
    """In-memory response cache configuration."""

    enabled: bool = True
    ttl_seconds: float = Field(default=300.0, gt=0)  # 5 minutes


class SearchSettings(BaseModel):
    """Search pipeline configuration."""

    suggestion_limit: int = Field(default=12, ge=1)
    keywords_file: str | None = None
    random_preferred_probability: float = Field(default=0.7, ge=0.0, le=1.0)


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Configuration is loaded from multiple sources with the following priority
    (highest to lowest):
    1. Values passed to Settings()
    2. Environment variables
    3. .env file
    4. Environment-specific YAML files (config/environments/{APP_ENV}/)
    5. Base YAML files (config/base/)
    6. Default values in code

    Environment variables can override any setting using the nested delimiter '__'.
    For example: MEALDB__PREFERRED_AREA=Thai overrides mealdb.preferred_area.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    logging: LoggingSettings = LoggingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    mealdb: MealDbSettings = MealDbSettings()
    cache: CacheSettings = CacheSettings()
    search: SearchSettings = SearchSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings loading order (see class docstring)."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_non_production(self) -> bool:
        """Check if running in a non-production environment.

        Returns True for local, test, and development environments where
        API documentation and debug logging are enabled.
        """
        return self.APP_ENV in ("local", "test", "development")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Using lru_cache ensures settings are only loaded once,
    improving performance and consistency.
    """
    return Settings()
