"""Public configuration entry points."""

from pathlib import Path
from typing import Any

from .resolver import ConfigResolver
from .scope import get_ambient_resolved_config
from .types import ResolvedConfig

_default_resolver = ConfigResolver()


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    use_env_file: str | Path | None = None,
    project_root: Path | None = None,
) -> ResolvedConfig:
    """Merge every configuration source into a `ResolvedConfig`.

    Outside a scope the order is
    Programmatic > Environment > Project file > Home file > Defaults.
    Inside `config_scope` or `config_override` the scoped configuration is
    the base and only `programmatic` is layered on top; files and the
    environment are not read again.

    Raises:
        ConfigurationError: If a source is malformed or validation fails.

    Example:
        resolved = resolve_config({"keep_parens": True})
        print(resolved.audit())
    """
    scoped = get_ambient_resolved_config()
    if scoped is None:
        return _default_resolver.resolve(
            programmatic,
            use_env_file=use_env_file,
            project_root=project_root,
        )
    return scoped.with_overrides(**programmatic) if programmatic else scoped


def check_environment() -> dict[str, str]:
    """Return the WOLFRAM_* variables currently set, app id redacted."""
    return _default_resolver.env_loader.get_env_summary()
