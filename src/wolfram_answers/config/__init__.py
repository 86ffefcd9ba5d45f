"""Configuration management for wolfram_answers.

Resolve-once, freeze-then-flow:
- ResolvedConfig: merged configuration with audit metadata
- FrozenConfig: immutable configuration handed to clients and extractors
- config_scope / config_override: context-local overrides
"""

from .api import check_environment, resolve_config
from .env_loader import EnvironmentConfigLoader
from .file_loader import ConfigFileError, FileConfigLoader
from .resolver import ConfigResolver
from .schema import WolframSettings
from .scope import config_override, config_scope, get_ambient_resolved_config
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [  # noqa: RUF022
    # Resolution
    "resolve_config",
    "check_environment",
    "ConfigResolver",
    "EnvironmentConfigLoader",
    "FileConfigLoader",
    "ConfigFileError",
    "WolframSettings",
    # Scoping
    "config_scope",
    "config_override",
    "get_ambient_resolved_config",
    # Types
    "ConfigOrigin",
    "FrozenConfig",
    "ResolvedConfig",
    "SourceMap",
]
