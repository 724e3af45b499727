"""Diff configuration and environment resolution."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import os
from typing import Any, Callable, Mapping
import warnings

from alignpack.core.exceptions import DiffConfigError
from alignpack.core.types import (
    TERMINAL_ENCODING_ALIASES,
    TERMINAL_ENCODINGS,
    TerminalEncoding,
)

TERMINAL_ENCODING_ENV_VAR = "ALIGNKIT_TERMINAL_ENCODING"
DIFF_ENABLED_ENV_VAR = "ALIGNKIT_DIFF_ENABLED"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

StringConverter = Callable[[Any], str]


def normalize_terminal_encoding(value: str | None) -> TerminalEncoding:
    """Resolve an encoding name or alias to its canonical form."""
    if value is None:
        raise TypeError("terminal encoding must be set")
    if not isinstance(value, str):
        raise TypeError(f"terminal encoding must be a str, got {type(value).__name__}")

    normalized = value.strip().lower().replace("_", "-")
    normalized = TERMINAL_ENCODING_ALIASES.get(normalized, normalized)
    if normalized not in TERMINAL_ENCODINGS:
        raise DiffConfigError(
            f"Unsupported terminal encoding: {value}. "
            f"Expected one of: {', '.join(TERMINAL_ENCODINGS)}"
        )
    return normalized  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Settings shared by the diff generator and the context renderer."""

    terminal_encoding: TerminalEncoding = "plain-text"
    diff_enabled: bool = True
    string_converters: Mapping[type, StringConverter] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "terminal_encoding",
            normalize_terminal_encoding(self.terminal_encoding),
        )
        if not isinstance(self.diff_enabled, bool):
            raise DiffConfigError("diff_enabled must be a boolean")
        for value_type, converter in self.string_converters.items():
            if not isinstance(value_type, type):
                raise DiffConfigError(f"string converter key must be a type: {value_type!r}")
            if not callable(converter):
                raise DiffConfigError(
                    f"string converter for {value_type.__name__} must be callable"
                )

    @classmethod
    def from_env(cls) -> DiffConfig:
        """Build a config from ALIGNKIT_* environment variables."""
        return cls(
            terminal_encoding=_resolve_env_encoding(),
            diff_enabled=_resolve_env_diff_enabled(),
        )

    def with_encoding(self, encoding: str) -> DiffConfig:
        return replace(self, terminal_encoding=normalize_terminal_encoding(encoding))

    def with_diff(self) -> DiffConfig:
        if self.diff_enabled:
            return self
        return replace(self, diff_enabled=True)

    def without_diff(self) -> DiffConfig:
        if not self.diff_enabled:
            return self
        return replace(self, diff_enabled=False)

    def with_string_converter(self, value_type: type, converter: StringConverter) -> DiffConfig:
        """Return a copy that stringifies ``value_type`` (exact match only) with ``converter``."""
        converters = dict(self.string_converters)
        converters[value_type] = converter
        return replace(self, string_converters=converters)

    def convert_to_string(self, value: Any) -> str:
        converter = self.string_converters.get(type(value))
        if converter is None:
            return str(value)
        return converter(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "terminal_encoding": self.terminal_encoding,
            "diff_enabled": self.diff_enabled,
            "string_converters": sorted(
                value_type.__name__ for value_type in self.string_converters
            ),
        }


def _resolve_env_encoding() -> TerminalEncoding:
    raw = os.environ.get(TERMINAL_ENCODING_ENV_VAR, "").strip()
    if not raw:
        return "plain-text"
    try:
        return normalize_terminal_encoding(raw)
    except DiffConfigError:
        warnings.warn(
            f"Ignoring {TERMINAL_ENCODING_ENV_VAR}={raw!r}: unsupported terminal encoding",
            RuntimeWarning,
            stacklevel=3,
        )
        return "plain-text"


def _resolve_env_diff_enabled() -> bool:
    raw = os.environ.get(DIFF_ENABLED_ENV_VAR)
    if raw is None or not raw.strip():
        return True
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    warnings.warn(
        f"Ignoring {DIFF_ENABLED_ENV_VAR}={raw!r}: expected a boolean",
        RuntimeWarning,
        stacklevel=3,
    )
    return True
