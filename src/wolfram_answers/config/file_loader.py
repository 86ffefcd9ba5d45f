"""File-based configuration loading.

Supports a project-level ``[tool.wolfram_answers]`` table in pyproject.toml
and a home-level ``~/.config/wolfram_answers.toml``.
"""

import os
from pathlib import Path
import tomllib
from typing import Any

from wolfram_answers.exceptions import ConfigurationError

HOME_CONFIG_ENV = "WOLFRAM_ANSWERS_CONFIG_HOME"


class ConfigFileError(ConfigurationError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(
        self, file_path: Path, message: str, cause: Exception | None = None
    ) -> None:
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(f"Config file error in {file_path}: {message}")


class FileConfigLoader:
    """Loads configuration from TOML files."""

    def load_project_config(self, project_root: Path | None = None) -> dict[str, Any]:
        """Load ``[tool.wolfram_answers]`` from the nearest pyproject.toml.

        Args:
            project_root: Directory to start searching from; defaults to the
                current directory. Parent directories are searched too.

        Returns:
            The table's values, or an empty dict when there is no file or table.

        Raises:
            ConfigFileError: If the file exists but cannot be parsed.
        """
        pyproject_path = self._find_pyproject_toml(project_root)
        if not pyproject_path:
            return {}

        data = self._read_toml(pyproject_path)
        section = data.get("tool", {}).get("wolfram_answers", {})
        if not isinstance(section, dict):
            raise ConfigFileError(
                pyproject_path, "[tool.wolfram_answers] must be a table"
            )
        return dict(section)

    def load_home_config(self) -> dict[str, Any]:
        """Load the home configuration file, or an empty dict if it is missing."""
        home_config_path = self.home_config_path()
        if not home_config_path.exists():
            return {}
        return self._read_toml(home_config_path)

    def home_config_path(self) -> Path:
        """Path of the home file; ``WOLFRAM_ANSWERS_CONFIG_HOME`` overrides it."""
        override = os.getenv(HOME_CONFIG_ENV)
        if override:
            return Path(override)
        return Path.home() / ".config" / "wolfram_answers.toml"

    def _read_toml(self, path: Path) -> dict[str, Any]:
        try:
            with path.open(mode="rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigFileError(path, f"Failed to parse TOML: {e}", cause=e) from e

    def _find_pyproject_toml(self, start_dir: Path | None = None) -> Path | None:
        current = Path(start_dir or Path.cwd()).resolve()

        while current != current.parent:  # Stop at filesystem root
            pyproject_path = current / "pyproject.toml"
            if pyproject_path.exists():
                return pyproject_path
            current = current.parent

        return None
