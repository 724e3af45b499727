"""Plain-text layout of context lines."""

from __future__ import annotations

from typing import Iterable

from alignpack.context.models import ContextLine


def format_context(lines: Iterable[ContextLine]) -> str:
    """Join context lines with their keys padded to a common width.

    Lines with an empty key contribute their value only.
    """
    entries = list(lines)
    width = max((len(line.key) for line in entries), default=0)
    rendered: list[str] = []
    for line in entries:
        if line.key:
            rendered.append(f"{line.key.ljust(width)}: {line.value}")
        else:
            rendered.append(str(line.value))
    return "\n".join(rendered)
