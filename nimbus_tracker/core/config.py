"""
Application configuration models and helpers.

Settings are sourced from the environment (optionally a ``.env`` file) and
validated once per process. The NimbusPost service credentials are required;
everything else has a sensible default.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NIMBUS_BASE_URL = "https://api.nimbuspost.com/v1"


class NimbusSettings(BaseSettings):
    """Credentials and transport options for the NimbusPost API."""

    email: str = Field(..., validation_alias="NIMBUS_EMAIL")
    password: SecretStr = Field(..., validation_alias="NIMBUS_PASSWORD")
    base_url: str = Field(DEFAULT_NIMBUS_BASE_URL, validation_alias="NIMBUS_BASE_URL")
    timeout_seconds: float = Field(
        10.0,
        validation_alias="NIMBUS_TIMEOUT_SECONDS",
        description="Upper bound applied to every upstream request.",
    )
    retry_on_unauthorized: bool = Field(
        False,
        validation_alias="NIMBUS_RETRY_ON_UNAUTHORIZED",
        description=(
            "Retry a tracking lookup once with a fresh token when NimbusPost "
            "answers 401."
        ),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Root settings object for the FastAPI application."""

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(5000, validation_alias="PORT")
    cors_origins: str = Field(
        "*",
        validation_alias="CORS_ORIGINS",
        description="Comma-separated list of origins allowed by CORS.",
    )
    nimbus: NimbusSettings = Field(default_factory=NimbusSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> List[str]:
        """Split ``cors_origins`` into individual origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "DEFAULT_NIMBUS_BASE_URL",
    "NimbusSettings",
    "get_settings",
]
