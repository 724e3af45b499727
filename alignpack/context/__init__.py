"""Context lines for failure messages."""

from alignpack.context.formatting import format_context
from alignpack.context.models import ContextLine
from alignpack.context.renderer import DIFF_LABEL, ELISION_MARKER, ContextRenderer

__all__ = [
    "ContextLine",
    "ContextRenderer",
    "DIFF_LABEL",
    "ELISION_MARKER",
    "format_context",
]
