"""Core types, configuration and exceptions for AlignKit."""

from alignpack.core.config import (
    DIFF_ENABLED_ENV_VAR,
    TERMINAL_ENCODING_ENV_VAR,
    DiffConfig,
    normalize_terminal_encoding,
)
from alignpack.core.exceptions import AlignError, DiffConfigError, IllegalStateError
from alignpack.core.types import (
    OPERATION_KINDS,
    TERMINAL_ENCODINGS,
    OperationKind,
    TerminalEncoding,
)

__all__ = [
    "AlignError",
    "DiffConfigError",
    "IllegalStateError",
    "DiffConfig",
    "DIFF_ENABLED_ENV_VAR",
    "TERMINAL_ENCODING_ENV_VAR",
    "normalize_terminal_encoding",
    "OPERATION_KINDS",
    "OperationKind",
    "TERMINAL_ENCODINGS",
    "TerminalEncoding",
]
