"""Context-local configuration overrides.

The active scope is stored in a context variable, so nested scopes unwind
correctly and concurrent threads or asyncio tasks never see each other's
overrides. Only `resolve_config()` consults the scope; a `FrozenConfig` that
was already handed to a client keeps its values.
"""

from collections.abc import Generator
from contextlib import contextmanager
import contextvars
from typing import Any

from .types import ResolvedConfig

_scoped_config: contextvars.ContextVar[ResolvedConfig | None] = contextvars.ContextVar(
    "wolfram_answers_scoped_config", default=None
)


def get_ambient_resolved_config() -> ResolvedConfig | None:
    """Configuration of the innermost active scope, or None outside any scope."""
    return _scoped_config.get()


@contextmanager
def config_scope(config: ResolvedConfig) -> Generator[None]:
    """Make `config` the base for every `resolve_config()` call in the block.

    Example:
        strict = resolve_config({"keep_parens": False})
        with config_scope(strict):
            answer = get_answer(document)
    """
    token = _scoped_config.set(config)
    try:
        yield
    finally:
        _scoped_config.reset(token)


@contextmanager
def config_override(**overrides: Any) -> Generator[None]:
    """Override single fields on top of the current configuration.

    Scopes nest: the innermost override wins, outer values stay visible.

    Example:
        with config_override(keep_parens=True):
            answer = get_answer(document)
    """
    current = get_ambient_resolved_config()
    if current is None:
        from .api import resolve_config  # api imports this module

        current = resolve_config()

    with config_scope(current.with_overrides(**overrides)):
        yield
