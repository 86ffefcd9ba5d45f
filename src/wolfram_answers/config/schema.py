"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces configuration
values from the environment, files and programmatic overrides.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wolfram_answers.constants import NETWORK_TIMEOUT


class WolframSettings(BaseSettings):
    """Pydantic settings schema for wolfram_answers.

    Integrates with environment variables using the WOLFRAM_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="WOLFRAM_",
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_id: str | None = Field(
        default=None,
        description="Wolfram|Alpha app id, only needed for network calls",
    )

    keep_parens: bool = Field(
        default=False,
        description="Keep parenthesized asides in answer text",
    )

    timeout: float = Field(
        default=NETWORK_TIMEOUT,
        description="HTTP timeout in seconds",
        gt=0,
    )

    @field_validator("app_id", mode="before")
    @classmethod
    def blank_app_id_is_unset(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only app id as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary keyed by field name."""
        return {
            "app_id": self.app_id,
            "keep_parens": self.keep_parens,
            "timeout": self.timeout,
        }


def default_values() -> dict[str, Any]:
    """Schema defaults, without reading the environment."""
    return {name: field.default for name, field in WolframSettings.model_fields.items()}
