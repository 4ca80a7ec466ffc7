"""
Centralized configuration for the Propostas backend.

All settings are loaded from environment variables (or a local .env file).
Provider credentials and the token secret have no defaults: the service
refuses to start without them.
"""

from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = "Propostas API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings ("*" is permissive, a single origin pins the front-end)
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Identity / database provider
    identity_url: str = Field(
        validation_alias=AliasChoices("identity_url", "supabase_url"),
    )
    identity_anon_key: str = Field(
        validation_alias=AliasChoices("identity_anon_key", "supabase_anon_key"),
    )
    identity_admin_key: str = Field(
        validation_alias=AliasChoices("identity_admin_key", "supabase_service_role_key"),
    )

    # Session tokens
    token_secret: str = Field(
        validation_alias=AliasChoices("token_secret", "jwt_secret"),
    )
    token_ttl_hours: int = 8

    # Registration
    permitted_email_domain: str

    # Set when proposals.data is a text column instead of json/jsonb
    proposal_data_as_text: bool = False


def _missing_variables(error: PydanticValidationError) -> list[str]:
    """Extract the environment variable names of missing required fields."""
    missing = []
    for item in error.errors():
        if item.get("type") != "missing" or not item.get("loc"):
            continue
        name = str(item["loc"][0])
        if name not in missing:
            missing.append(name)
    return [name.upper() for name in missing]


def load_settings(**overrides: Any) -> Settings:
    """
    Load settings, failing fast on missing configuration.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If a required variable is absent or a value is invalid
    """
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        missing = _missing_variables(e)
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}",
                details={"missing": missing},
            ) from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return load_settings()
