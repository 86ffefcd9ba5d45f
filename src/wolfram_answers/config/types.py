"""Core configuration data types.

Configuration follows a resolve-once, freeze-then-flow pattern: values are
merged into a `ResolvedConfig` (with audit metadata) and handed to clients and
extractors as an immutable `FrozenConfig`.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

from pydantic import ValidationError

from wolfram_answers.constants import NETWORK_TIMEOUT
from wolfram_answers.exceptions import ConfigurationError

from .schema import WolframSettings

# --- Source Tracking Types ---

ConfigOrigin = Literal["programmatic", "env", "file", "default"]
SourceMap = Mapping[str, ConfigOrigin]

FIELD_ORDER = ("app_id", "keep_parens", "timeout")


class ResolvedConfig(NamedTuple):
    """Configuration after resolution from all sources, before freezing.

    Logically immutable; use `with_overrides` to derive variants.
    """

    app_id: str | None
    keep_parens: bool
    timeout: float

    # Audit metadata - tracks where each field value came from
    origin: SourceMap

    def __str__(self) -> str:
        """String representation with redacted app id for safe logging."""
        app_id_display = "[REDACTED]" if self.app_id else None
        return (
            f"ResolvedConfig(app_id={app_id_display!r}, "
            f"keep_parens={self.keep_parens!r}, timeout={self.timeout!r}, "
            f"origin={dict(self.origin)!r})"
        )

    def __repr__(self) -> str:
        return self.__str__()

    def to_frozen(self) -> "FrozenConfig":
        """Convert to the immutable configuration, dropping audit metadata."""
        return FrozenConfig(
            app_id=self.app_id,
            keep_parens=self.keep_parens,
            timeout=self.timeout,
        )

    def with_overrides(self, **overrides: object) -> "ResolvedConfig":
        """Derive a copy with some fields replaced, marked as programmatic.

        Values are validated and coerced like any other source. Keys that are
        not configuration fields are ignored.

        Raises:
            ConfigurationError: If an override fails validation.
        """
        known = {k: v for k, v in overrides.items() if k in FIELD_ORDER}
        merged = {field: getattr(self, field) for field in FIELD_ORDER} | known
        try:
            validated = WolframSettings(**merged).to_dict()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration override: {e}") from e

        origin = {**self.origin, **dict.fromkeys(known, "programmatic")}
        return self._replace(**validated, origin=origin)

    def audit(self) -> str:
        """Human-readable report of where each field came from.

        The app id is never shown.
        """
        lines = []
        for field in FIELD_ORDER:
            if field not in self.origin:
                continue
            origin = self.origin[field]
            value = getattr(self, field)

            if field == "app_id":
                value_display = f"{origin}:None" if value is None else f"{origin}:<redacted>"
            elif origin == "env":
                value_display = f"env:WOLFRAM_{field.upper()}={value}"
            else:
                value_display = f"{origin}:{value}"

            lines.append(f"{field}: {value_display}")

        return "\n".join(lines)


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration handed to clients and extractors."""

    app_id: str | None = None
    keep_parens: bool = False
    timeout: float = NETWORK_TIMEOUT

    def __str__(self) -> str:
        """String representation with redacted app id for safe logging."""
        app_id_display = "[REDACTED]" if self.app_id else None
        return (
            f"FrozenConfig(app_id={app_id_display!r}, "
            f"keep_parens={self.keep_parens!r}, timeout={self.timeout!r})"
        )

    def __repr__(self) -> str:
        return self.__str__()
