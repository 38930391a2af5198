"""Configuration management for clreport."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from clreport.core.constants import JSON_INDENT
from clreport.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLREPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output Configuration
    default_output_format: Literal["xml", "json"] = Field(
        default="xml",
        description="Default output format",
    )
    include_empty_sections: bool = Field(
        default=False,
        description="Render sections without elements as count=\"0\" containers",
    )
    xml_declaration: bool = Field(
        default=False,
        description="Prepend an XML declaration to rendered reports",
    )
    json_indent: int = Field(
        default=JSON_INDENT,
        ge=0,
        le=8,
        description="Indentation for JSON output",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for the clreport logger",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit structured JSON log records",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()


def load_settings(**overrides: Any) -> Settings:
    """
    Build settings from the environment with explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        raise ConfigurationError(setting, first.get("msg", str(e)), first.get("input")) from e
