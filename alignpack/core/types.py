"""Type definitions for AlignKit core models."""

from typing import Literal

OperationKind = Literal["equal", "delete", "insert"]

OPERATION_KINDS: tuple[str, ...] = ("equal", "delete", "insert")

TerminalEncoding = Literal[
    "plain-text",
    "16-colors",
    "256-colors",
    "16-million-colors",
]

# Ordered from the least to the most capable terminal.
TERMINAL_ENCODINGS: tuple[str, ...] = (
    "plain-text",
    "16-colors",
    "256-colors",
    "16-million-colors",
)

TERMINAL_ENCODING_ALIASES: dict[str, str] = {
    "plain": "plain-text",
    "none": "plain-text",
    "16": "16-colors",
    "256": "256-colors",
    "16m": "16-million-colors",
    "truecolor": "16-million-colors",
}
