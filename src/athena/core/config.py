"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class CorsConfig(BaseSettings):
    """Cross-origin configuration for the diagnostic endpoint."""

    model_config = {"env_prefix": "ATHENA_CORS_"}

    allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    allow_methods: list[str] = Field(default_factory=lambda: ["POST", "OPTIONS"])
    allow_headers: list[str] = Field(default_factory=lambda: ["Content-Type"])
    max_age: int = 86400

    @property
    def allows_any_origin(self) -> bool:
        return "*" in self.allow_origins


class ClassificationConfig(BaseSettings):
    """Boundary classification catalog configuration."""

    model_config = {"env_prefix": "ATHENA_CLASSIFICATION_"}

    catalog_path: str | None = None


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "ATHENA_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    cors: CorsConfig = Field(default_factory=CorsConfig)
    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)

    @model_validator(mode="after")
    def _restrict_origins_in_production(self) -> Settings:
        if self.environment == "production" and self.cors.allows_any_origin:
            raise ValueError(
                "Wildcard CORS origin is not allowed in production; "
                "set ATHENA_CORS_ALLOW_ORIGINS to the site origin"
            )
        return self
