"""Pipeline from two strings to an aligned diff rendering."""

from __future__ import annotations

from alignpack.core.config import normalize_terminal_encoding
from alignpack.core.types import TerminalEncoding
from alignpack.diff.differ import diff_chars
from alignpack.diff.merger import merge_word_deltas
from alignpack.diff.models import DiffOperation, DiffResult
from alignpack.diff.writers import DiffWriter, create_writer

# Appended to both values so trailing whitespace differences stay visible.
EOS_MARKER = "\\0"


class DiffGenerator:
    """Diff strings for one terminal encoding."""

    def __init__(self, encoding: str = "plain-text") -> None:
        self.encoding: TerminalEncoding = normalize_terminal_encoding(encoding)

    def operations(self, actual: str, expected: str) -> list[DiffOperation]:
        """Word-merged edit script for the two values, sentinel included."""
        _require_str(actual, "actual")
        _require_str(expected, "expected")
        raw = diff_chars(actual + EOS_MARKER, expected + EOS_MARKER)
        return merge_word_deltas(raw)

    def diff(self, actual: str, expected: str) -> DiffResult:
        writer = create_writer(self.encoding)
        write_operations(writer, self.operations(actual, expected))
        writer.close()
        return writer.to_result()


def write_operations(writer: DiffWriter, operations: list[DiffOperation]) -> None:
    for operation in operations:
        if operation.kind == "equal":
            writer.write_equal(operation.text)
        elif operation.kind == "delete":
            writer.write_deleted(operation.text)
        else:
            writer.write_inserted(operation.text)


def diff_strings(actual: str, expected: str, *, encoding: str = "plain-text") -> DiffResult:
    """Return the aligned diff of ``actual`` against ``expected``."""
    return DiffGenerator(encoding).diff(actual, expected)


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
