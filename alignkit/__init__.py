"""Stable public API surface for AlignKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any

from alignpack.context import ContextLine, ContextRenderer, format_context
from alignpack.core.config import DiffConfig
from alignpack.core.exceptions import AlignError, DiffConfigError, IllegalStateError
from alignpack.core.types import TERMINAL_ENCODINGS, TerminalEncoding
from alignpack.diff import DiffGenerator, DiffResult

__version__ = "0.1.0"


def diff(
    actual: str,
    expected: str,
    *,
    encoding: TerminalEncoding | str = "plain-text",
) -> DiffResult:
    """Compute the aligned difference between two strings.

    Args:
        actual: Observed value.
        expected: Value that was expected.
        encoding: Terminal encoding used to render the lines.

    Returns:
        Line-aligned actual, marker and expected rows.
    """
    return DiffGenerator(encoding).diff(actual, expected)


def render_context(
    actual: Any,
    expected: Any,
    *,
    actual_name: str = "Actual",
    expected_name: str = "Expected",
    config: DiffConfig | None = None,
    expected_in_message: bool = False,
) -> list[ContextLine]:
    """Build the labeled context lines describing a mismatch.

    Args:
        actual: Observed value.
        expected: Value that was expected.
        actual_name: Label of the observed value.
        expected_name: Label of the expected value.
        config: Diff settings. Defaults to ``DiffConfig.from_env()``.
        expected_in_message: Omit the expected value when no diff is shown.

    Returns:
        Context lines in display order.
    """
    resolved_config = config if config is not None else DiffConfig.from_env()
    return ContextRenderer(resolved_config).render(
        actual_name,
        actual,
        expected_name,
        expected,
        expected_in_message=expected_in_message,
    )


def describe_difference(
    actual: Any,
    expected: Any,
    *,
    actual_name: str = "Actual",
    expected_name: str = "Expected",
    config: DiffConfig | None = None,
    expected_in_message: bool = False,
) -> str:
    """Render context lines and lay them out as message text."""
    return format_context(
        render_context(
            actual,
            expected,
            actual_name=actual_name,
            expected_name=expected_name,
            config=config,
            expected_in_message=expected_in_message,
        )
    )


__all__ = [
    "__version__",
    "TerminalEncoding",
    "TERMINAL_ENCODINGS",
    "AlignError",
    "DiffConfigError",
    "IllegalStateError",
    "DiffConfig",
    "DiffResult",
    "ContextLine",
    "diff",
    "render_context",
    "describe_difference",
]
