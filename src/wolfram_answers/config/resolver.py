"""Configuration resolution with precedence handling.

Merges configuration from all sources in this order:
Programmatic > Environment > Project file > Home file > Defaults
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from wolfram_answers.exceptions import ConfigurationError

from .env_loader import EnvironmentConfigLoader
from .file_loader import FileConfigLoader
from .schema import WolframSettings, default_values
from .types import ConfigOrigin, ResolvedConfig


class ConfigResolver:
    """Resolves configuration from multiple sources with proper precedence."""

    def __init__(self) -> None:
        self.file_loader = FileConfigLoader()
        self.env_loader = EnvironmentConfigLoader()

    def resolve(
        self,
        programmatic: dict[str, Any] | None = None,
        *,
        use_env_file: str | Path | None = None,
        project_root: Path | None = None,
    ) -> ResolvedConfig:
        """Resolve configuration from all sources.

        Args:
            programmatic: Overrides with the highest precedence. Unknown keys
                are ignored.
            use_env_file: Optional .env file to load before reading the
                environment.
            project_root: Directory to search for pyproject.toml.

        Raises:
            ConfigurationError: If a source is malformed or the merged values
                fail validation.
        """
        merged: dict[str, Any] = default_values()
        origins: dict[str, ConfigOrigin] = dict.fromkeys(merged, "default")

        def apply(values: dict[str, Any], origin: ConfigOrigin) -> None:
            for field, value in values.items():
                if field in merged:  # Only override known fields
                    merged[field] = value
                    origins[field] = origin

        apply(self.file_loader.load_home_config(), "file")
        apply(self.file_loader.load_project_config(project_root), "file")
        apply(self.env_loader.load_env_config(env_file=use_env_file), "env")
        if programmatic:
            apply(programmatic, "programmatic")

        try:
            final = WolframSettings(**merged).to_dict()
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        return ResolvedConfig(
            app_id=final["app_id"],
            keep_parens=final["keep_parens"],
            timeout=final["timeout"],
            origin=origins,
        )
