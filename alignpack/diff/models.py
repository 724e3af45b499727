"""Data models for character diffs and aligned diff output."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any

from alignpack.core.types import OPERATION_KINDS, OperationKind

_ANSI_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True, slots=True)
class DiffOperation:
    """A single edit script entry: text kept, deleted from actual or inserted from expected."""

    kind: OperationKind
    text: str

    def __post_init__(self) -> None:
        if self.kind not in OPERATION_KINDS:
            raise ValueError(f"Unsupported operation kind: {self.kind}")

    @classmethod
    def equal(cls, text: str) -> DiffOperation:
        return cls("equal", text)

    @classmethod
    def delete(cls, text: str) -> DiffOperation:
        return cls("delete", text)

    @classmethod
    def insert(cls, text: str) -> DiffOperation:
        return cls("insert", text)

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "text": self.text}


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Line-aligned rendering of the difference between two strings."""

    actual_lines: tuple[str, ...]
    diff_lines: tuple[str, ...]
    expected_lines: tuple[str, ...]
    padding_marker: str
    # True where that side's source line ends on the row.
    actual_line_ends: tuple[bool, ...]
    expected_line_ends: tuple[bool, ...]

    @property
    def line_count(self) -> int:
        return len(self.actual_lines)

    @property
    def identical(self) -> bool:
        """True when every marker line (or every line pair) reports no change."""
        if self.diff_lines:
            return all(not line.strip(" ") for line in self.diff_lines)
        return self.actual_lines == self.expected_lines

    def visible_text(self, line: str) -> str:
        """Strip terminal escape sequences from a rendered line."""
        return _ANSI_SGR_PATTERN.sub("", line)

    def is_padding_only(self, line: str) -> bool:
        """True if a line holds nothing but alignment padding."""
        visible = self.visible_text(line)
        return visible.strip(self.padding_marker) == ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "actual_lines": list(self.actual_lines),
            "diff_lines": list(self.diff_lines),
            "expected_lines": list(self.expected_lines),
            "padding_marker": self.padding_marker,
            "actual_line_ends": list(self.actual_line_ends),
            "expected_line_ends": list(self.expected_line_ends),
        }
