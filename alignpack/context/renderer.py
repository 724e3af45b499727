"""Render a pair of values as labeled context lines."""

from __future__ import annotations

from typing import Any

from alignpack.context.models import ContextLine
from alignpack.core.config import DiffConfig
from alignpack.diff.generator import DiffGenerator
from alignpack.diff.models import DiffResult

DIFF_LABEL = "Diff"
ELISION_MARKER = "[...]"

_SEPARATOR = ContextLine("", "")


class ContextRenderer:
    """Turn diff output into ``(label, line)`` pairs for a failure message.

    Args:
        config: Diff settings. Defaults to ``DiffConfig()``.
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self.config = config if config is not None else DiffConfig()
        self._generator = DiffGenerator(self.config.terminal_encoding)

    def render(
        self,
        actual_name: str,
        actual_value: Any,
        expected_name: str,
        expected_value: Any,
        *,
        expected_in_message: bool = False,
    ) -> list[ContextLine]:
        """Describe how ``actual_value`` differs from ``expected_value``.

        Args:
            actual_name: Label of the actual value.
            actual_value: The value that was observed.
            expected_name: Label of the expected value.
            expected_value: The value that was expected.
            expected_in_message: True if the caller already quotes the
                expected value, so it is left out when no diff is shown.

        Returns:
            Context lines in display order.

        Raises:
            ValueError: If either name is empty.
        """
        _require_name(actual_name, "actual_name")
        _require_name(expected_name, "expected_name")

        if not self.config.diff_enabled or isinstance(actual_value, bool):
            return _undiffed(
                actual_name,
                actual_value,
                expected_name,
                expected_value,
                expected_in_message=expected_in_message,
            )

        if _is_sequence(actual_value) and _is_sequence(expected_value):
            if actual_value or expected_value:
                return self._render_sequences(
                    actual_name, actual_value, expected_name, expected_value
                )

        actual_text = self.config.convert_to_string(actual_value)
        expected_text = self.config.convert_to_string(expected_value)
        lines = self._render_strings(actual_name, actual_text, expected_name, expected_text)

        actual_type = type(actual_value).__name__
        expected_type = type(expected_value).__name__
        if actual_text == expected_text and actual_type != expected_type:
            lines.extend(
                self._render_strings(
                    f"{actual_name}.type",
                    actual_type,
                    f"{expected_name}.type",
                    expected_type,
                )
            )
        return lines

    def _render_sequences(
        self,
        actual_name: str,
        actual_values: list[Any] | tuple[Any, ...],
        expected_name: str,
        expected_values: list[Any] | tuple[Any, ...],
    ) -> list[ContextLine]:
        length = max(len(actual_values), len(expected_values))
        lines: list[ContextLine] = []
        skipped = False

        for index in range(length):
            has_actual = index < len(actual_values)
            has_expected = index < len(expected_values)
            terminal = index == 0 or index == length - 1
            if (
                not terminal
                and has_actual
                and has_expected
                and actual_values[index] == expected_values[index]
            ):
                skipped = True
                continue
            if skipped:
                lines.extend(_elision())
                skipped = False

            if has_actual:
                element_actual_name = f"{actual_name}[{index}]"
                element_actual = self.config.convert_to_string(actual_values[index])
            else:
                element_actual_name = actual_name
                element_actual = ""
            if has_expected:
                element_expected_name = f"{expected_name}[{index}]"
                element_expected = self.config.convert_to_string(expected_values[index])
            else:
                element_expected_name = expected_name
                element_expected = ""

            lines.extend(
                self._render_strings(
                    element_actual_name,
                    element_actual,
                    element_expected_name,
                    element_expected,
                )
            )
        return lines

    def _render_strings(
        self,
        actual_name: str,
        actual: str,
        expected_name: str,
        expected: str,
    ) -> list[ContextLine]:
        result = self._generator.diff(actual, expected)
        if result.line_count == 1:
            lines = [_SEPARATOR, ContextLine(actual_name, result.actual_lines[0])]
            if result.diff_lines and not _lines_equal(result, 0):
                lines.append(ContextLine(DIFF_LABEL, result.diff_lines[0]))
            lines.append(ContextLine(expected_name, result.expected_lines[0]))
            return lines
        return self._render_rows(result, actual_name, expected_name)

    def _render_rows(
        self,
        result: DiffResult,
        actual_name: str,
        expected_name: str,
    ) -> list[ContextLine]:
        lines: list[ContextLine] = []
        actual_line_number = 0
        expected_line_number = 0
        skipped = False
        last_row = result.line_count - 1

        for row in range(result.line_count):
            equal = _lines_equal(result, row)
            if equal and 0 < row < last_row:
                skipped = True
                actual_line_number += 1
                expected_line_number += 1
                continue
            if skipped:
                lines.extend(_elision())
                skipped = False

            actual_line = result.actual_lines[row]
            expected_line = result.expected_lines[row]
            lines.append(_SEPARATOR)
            lines.append(
                ContextLine(_row_label(result, actual_name, actual_line, actual_line_number), actual_line)
            )
            if result.diff_lines and not equal:
                lines.append(ContextLine(DIFF_LABEL, result.diff_lines[row]))
            lines.append(
                ContextLine(
                    _row_label(result, expected_name, expected_line, expected_line_number),
                    expected_line,
                )
            )

            if result.actual_line_ends[row]:
                actual_line_number += 1
            if result.expected_line_ends[row]:
                expected_line_number += 1
        return lines


def _undiffed(
    actual_name: str,
    actual_value: Any,
    expected_name: str,
    expected_value: Any,
    *,
    expected_in_message: bool,
) -> list[ContextLine]:
    lines = [ContextLine(actual_name, actual_value)]
    if not expected_in_message:
        lines.append(ContextLine(expected_name, expected_value))
    return lines


def _lines_equal(result: DiffResult, row: int) -> bool:
    if result.diff_lines:
        diff_line = result.diff_lines[row]
        if diff_line:
            return diff_line.strip(" ") == ""
    return result.actual_lines[row] == result.expected_lines[row]


def _row_label(result: DiffResult, name: str, line: str, line_number: int) -> str:
    if result.is_padding_only(line):
        return name
    return f"{name}@{line_number}"


def _elision() -> list[ContextLine]:
    return [_SEPARATOR, ContextLine("", ELISION_MARKER)]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _require_name(name: Any, parameter: str) -> None:
    if not isinstance(name, str):
        raise TypeError(f"{parameter} must be a str, got {type(name).__name__}")
    if not name.strip():
        raise ValueError(f"{parameter} may not be empty")
