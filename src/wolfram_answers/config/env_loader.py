"""Environment variable configuration loading.

Reads WOLFRAM_* variables, optionally after loading a .env file, and coerces
them through the settings schema.
"""

import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from wolfram_answers.exceptions import ConfigurationError

from .schema import WolframSettings

ENV_VARS = {
    "WOLFRAM_APP_ID": "app_id",
    "WOLFRAM_KEEP_PARENS": "keep_parens",
    "WOLFRAM_TIMEOUT": "timeout",
}


class EnvironmentConfigLoader:
    """Loads configuration from WOLFRAM_* environment variables."""

    def load_env_config(self, env_file: str | Path | None = None) -> dict[str, Any]:
        """Load configuration from environment variables.

        Args:
            env_file: Optional .env file loaded into the environment first.
                Existing variables are not overridden.

        Returns:
            Only the fields that are actually set in the environment.

        Raises:
            ConfigurationError: If a variable holds an invalid value or the
                .env file cannot be read.
        """
        if env_file:
            self._load_env_file(env_file)

        env_values = {
            field_name: os.environ[env_var]
            for env_var, field_name in ENV_VARS.items()
            if env_var in os.environ
        }
        if not env_values:
            return {}

        try:
            settings = WolframSettings(**env_values)
        except ValidationError as e:
            env_var_list = [
                f"{env_var}={os.environ[env_var]}"
                for env_var, field_name in ENV_VARS.items()
                if field_name in env_values and env_var != "WOLFRAM_APP_ID"
            ]
            raise ConfigurationError(
                f"Invalid environment variable values: {', '.join(env_var_list)}. "
                f"Error: {e}"
            ) from e

        return {field_name: getattr(settings, field_name) for field_name in env_values}

    def _load_env_file(self, env_file: str | Path) -> None:
        env_path = Path(env_file)
        if not env_path.exists():
            raise ConfigurationError(f"Environment file not found: {env_path}")

        try:
            with env_path.open(encoding="utf-8") as f:
                for line_num, raw in enumerate(f, 1):
                    line = raw.strip()

                    if not line or line.startswith("#"):
                        continue

                    if "=" not in line:
                        raise ConfigurationError(
                            f"Invalid format at line {line_num} of {env_path}. "
                            "Expected KEY=VALUE format."
                        )

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    if key not in os.environ:
                        os.environ[key] = value

        except OSError as e:
            raise ConfigurationError(
                f"Failed to read environment file {env_path}: {e}"
            ) from e

    def get_env_summary(self) -> dict[str, str]:
        """Current WOLFRAM_* variables, with the app id redacted."""
        return {
            env_var: "<redacted>" if env_var == "WOLFRAM_APP_ID" else os.environ[env_var]
            for env_var in ENV_VARS
            if env_var in os.environ
        }
