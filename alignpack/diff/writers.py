"""Line writers that turn an edit script into vertically aligned output.

A writer keeps one row buffer per side. Rows are indexed by line number and
shared between the sides: whatever is written to one side of a row is matched
by text or padding of the same length on the other side, so both renderings
line up column for column.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Literal

import typer

from alignpack.core.config import normalize_terminal_encoding
from alignpack.core.exceptions import IllegalStateError
from alignpack.diff.models import DiffResult

NEWLINE_MARKER = "\\n"
NEWLINE_PATTERN = re.compile(r"\r?\n")

DIFF_EQUAL = " "
DIFF_DELETE = "-"
DIFF_INSERT = "+"

Decoration = Literal["equal", "delete", "insert", "padding"]
Segment = tuple[Decoration, str]


class DiffWriter:
    """Append-only sink for edit script operations.

    The writer is OPEN until :meth:`close` is called; afterwards it only
    answers the line getters.
    """

    def __init__(self, padding_marker: str) -> None:
        if len(padding_marker) != 1:
            raise ValueError("padding_marker must be a single character")
        self.padding_marker = padding_marker
        self._actual_line_number = 0
        self._expected_line_number = 0
        self._actual_rows: dict[int, list[Segment]] = {}
        self._expected_rows: dict[int, list[Segment]] = {}
        self._actual_line_ends: set[int] = set()
        self._expected_line_ends: set[int] = set()
        self._closed = False
        self._actual_lines: tuple[str, ...] = ()
        self._expected_lines: tuple[str, ...] = ()

    @property
    def closed(self) -> bool:
        return self._closed

    def write_equal(self, text: str) -> None:
        """Append text present in both values."""
        self._require_open()
        self._split_lines(text, self._write_equal_line, self._equal_newline)

    def write_deleted(self, text: str) -> None:
        """Append text present only in the actual value."""
        self._require_open()
        self._split_lines(text, self._write_deleted_line, self._actual_newline)

    def write_inserted(self, text: str) -> None:
        """Append text present only in the expected value."""
        self._require_open()
        self._split_lines(text, self._write_inserted_line, self._expected_newline)

    def close(self) -> None:
        """Freeze the output lines. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        # The last line of each side ends at the end of its value.
        self._actual_line_ends.add(self._actual_line_number)
        self._expected_line_ends.add(self._expected_line_number)

        last_row = max(
            self._actual_line_number,
            self._expected_line_number,
            *self._actual_rows.keys(),
            *self._expected_rows.keys(),
        )
        line_count = last_row + 1
        self._actual_lines = tuple(
            self.render_row(self._actual_rows.get(row, [])) for row in range(line_count)
        )
        self._expected_lines = tuple(
            self.render_row(self._expected_rows.get(row, [])) for row in range(line_count)
        )
        self._after_close(line_count)
        self._verify_alignment(line_count)

    @property
    def actual_lines(self) -> tuple[str, ...]:
        self._require_closed()
        return self._actual_lines

    @property
    def expected_lines(self) -> tuple[str, ...]:
        self._require_closed()
        return self._expected_lines

    @property
    def diff_lines(self) -> tuple[str, ...]:
        """Marker lines shown between actual and expected; empty when the encoding has none."""
        self._require_closed()
        return ()

    def to_result(self) -> DiffResult:
        return DiffResult(
            actual_lines=self.actual_lines,
            diff_lines=self.diff_lines,
            expected_lines=self.expected_lines,
            padding_marker=self.padding_marker,
            actual_line_ends=self._line_end_flags(self._actual_line_ends),
            expected_line_ends=self._line_end_flags(self._expected_line_ends),
        )

    def decorate(self, decoration: Decoration, text: str) -> str:
        """Render one run of same-decoration text."""
        return text

    def render_row(self, segments: list[Segment]) -> str:
        return "".join(text for _, text in segments)

    def _mark(self, row: int, marker: str, length: int) -> None:
        """Record per-character markers for a row. Only plain text keeps them."""

    def _after_close(self, line_count: int) -> None:
        pass

    def _write_equal_line(self, line: str) -> None:
        actual_row = self._actual_line_number
        expected_row = self._expected_line_number
        length = len(line)

        self._append(self._actual_rows, actual_row, "equal", line)
        if actual_row == expected_row:
            self._mark(actual_row, DIFF_EQUAL, length)
        else:
            padding = self.padding_marker * length
            self._append(self._expected_rows, actual_row, "padding", padding)
            self._mark(actual_row, self.padding_marker, length)
            self._append(self._actual_rows, expected_row, "padding", padding)
            self._mark(expected_row, self.padding_marker, length)
        self._append(self._expected_rows, expected_row, "equal", line)

    def _write_deleted_line(self, line: str) -> None:
        row = self._actual_line_number
        self._append(self._actual_rows, row, "delete", line)
        self._append(self._expected_rows, row, "padding", self.padding_marker * len(line))
        self._mark(row, DIFF_DELETE, len(line))

    def _write_inserted_line(self, line: str) -> None:
        row = self._expected_line_number
        self._append(self._expected_rows, row, "insert", line)
        self._append(self._actual_rows, row, "padding", self.padding_marker * len(line))
        self._mark(row, DIFF_INSERT, len(line))

    def _equal_newline(self) -> None:
        self._actual_newline()
        self._expected_newline()

    def _actual_newline(self) -> None:
        self._actual_line_ends.add(self._actual_line_number)
        self._actual_line_number += 1

    def _expected_newline(self) -> None:
        self._expected_line_ends.add(self._expected_line_number)
        self._expected_line_number += 1

    def _line_end_flags(self, rows: set[int]) -> tuple[bool, ...]:
        return tuple(row in rows for row in range(len(self._actual_lines)))

    @staticmethod
    def _split_lines(
        text: str,
        on_line: Callable[[str], None],
        on_newline: Callable[[], None],
    ) -> None:
        lines = NEWLINE_PATTERN.split(text)
        last = len(lines) - 1
        for index, line in enumerate(lines):
            if index < last:
                line += NEWLINE_MARKER
            if line:
                on_line(line)
            if index < last:
                on_newline()

    @staticmethod
    def _append(rows: dict[int, list[Segment]], row: int, decoration: Decoration, text: str) -> None:
        rows.setdefault(row, []).append((decoration, text))

    def _require_open(self) -> None:
        if self._closed:
            raise IllegalStateError("Writer must be open")

    def _require_closed(self) -> None:
        if not self._closed:
            raise IllegalStateError("Writer must be closed")

    def _verify_alignment(self, line_count: int) -> None:
        if len(self._actual_lines) != len(self._expected_lines):
            raise AssertionError(
                f"actual has {len(self._actual_lines)} lines, "
                f"expected has {len(self._expected_lines)}"
            )
        for row in range(line_count):
            actual_width = _row_width(self._actual_rows.get(row, []))
            expected_width = _row_width(self._expected_rows.get(row, []))
            if actual_width != expected_width:
                raise AssertionError(
                    f"line {row} is misaligned: actual width {actual_width}, "
                    f"expected width {expected_width}"
                )


class PlainTextWriter(DiffWriter):
    """Writer without colors; a marker line shows what changed.

    * ``-`` marks a character to delete from actual.
    * ``+`` marks a character to insert into actual.
    * a space marks an unchanged character or alignment padding.

    For ``actual="int[6]"`` and ``expected="int[5]"``::

        Actual  : int[6 ]\\0
        Diff    :     -+
        Expected: int[ 5]\\0
    """

    PADDING_MARKER = " "

    def __init__(self) -> None:
        super().__init__(self.PADDING_MARKER)
        self._diff_rows: dict[int, list[str]] = {}
        self._diff_lines: tuple[str, ...] = ()

    @property
    def diff_lines(self) -> tuple[str, ...]:
        self._require_closed()
        return self._diff_lines

    def _mark(self, row: int, marker: str, length: int) -> None:
        self._diff_rows.setdefault(row, []).append(marker * length)

    def _after_close(self, line_count: int) -> None:
        self._diff_lines = tuple(
            "".join(self._diff_rows.get(row, [])) for row in range(line_count)
        )

    def _verify_alignment(self, line_count: int) -> None:
        super()._verify_alignment(line_count)
        for row in range(line_count):
            widths = {
                len(self._actual_lines[row]),
                len(self._diff_lines[row]),
                len(self._expected_lines[row]),
            }
            if len(widths) != 1:
                raise AssertionError(f"line {row} has mismatched widths: {sorted(widths)}")


class ColorWriter(DiffWriter):
    """Writer that highlights changes with ANSI background colors."""

    PADDING_MARKER = "/"

    delete_style: dict[str, Any] = {}
    insert_style: dict[str, Any] = {}
    padding_style: dict[str, Any] = {}

    def __init__(self) -> None:
        super().__init__(self.PADDING_MARKER)

    def decorate(self, decoration: Decoration, text: str) -> str:
        if decoration == "delete":
            return typer.style(text, **self.delete_style)
        if decoration == "insert":
            return typer.style(text, **self.insert_style)
        if decoration == "padding":
            return typer.style(text, **self.padding_style)
        return text

    def render_row(self, segments: list[Segment]) -> str:
        rendered: list[str] = []
        run_decoration: Decoration | None = None
        run: list[str] = []
        for decoration, text in segments:
            if decoration != run_decoration and run:
                rendered.append(self.decorate(run_decoration, "".join(run)))  # type: ignore[arg-type]
                run = []
            run_decoration = decoration
            run.append(text)
        if run:
            rendered.append(self.decorate(run_decoration, "".join(run)))  # type: ignore[arg-type]
        return "".join(rendered)


class Colors16Writer(ColorWriter):
    """Terminal with a 16-color palette."""

    delete_style = {"fg": typer.colors.BRIGHT_WHITE, "bg": typer.colors.RED}
    insert_style = {"fg": typer.colors.BRIGHT_WHITE, "bg": typer.colors.GREEN}
    padding_style = {"bg": typer.colors.BLACK}


class Colors256Writer(ColorWriter):
    """Terminal with a 256-color palette."""

    delete_style = {"fg": 15, "bg": 124}
    insert_style = {"fg": 15, "bg": 28}
    padding_style = {"bg": 16}


class Colors16MillionWriter(ColorWriter):
    """Terminal with 24-bit colors."""

    delete_style = {"fg": (255, 255, 255), "bg": (175, 0, 0)}
    insert_style = {"fg": (255, 255, 255), "bg": (0, 135, 0)}
    padding_style = {"bg": (0, 0, 0)}


_WRITERS_BY_ENCODING: dict[str, type[DiffWriter]] = {
    "plain-text": PlainTextWriter,
    "16-colors": Colors16Writer,
    "256-colors": Colors256Writer,
    "16-million-colors": Colors16MillionWriter,
}


def create_writer(encoding: str) -> DiffWriter:
    """Return a fresh writer for a terminal encoding."""
    writer_type = _WRITERS_BY_ENCODING[normalize_terminal_encoding(encoding)]
    return writer_type()


def _row_width(segments: list[Segment]) -> int:
    return sum(len(text) for _, text in segments)
