"""Character diff, word merge and aligned line writers."""

from alignpack.diff.differ import diff_chars
from alignpack.diff.generator import EOS_MARKER, DiffGenerator, diff_strings
from alignpack.diff.merger import (
    MAX_EDITS_PER_WORD,
    WORD_BOUNDARY_PATTERN,
    OpPosition,
    WordCursor,
    WordSpan,
    merge_word_deltas,
)
from alignpack.diff.models import DiffOperation, DiffResult
from alignpack.diff.writers import (
    NEWLINE_MARKER,
    ColorWriter,
    Colors16MillionWriter,
    Colors16Writer,
    Colors256Writer,
    DiffWriter,
    PlainTextWriter,
    create_writer,
)

__all__ = [
    "EOS_MARKER",
    "NEWLINE_MARKER",
    "MAX_EDITS_PER_WORD",
    "WORD_BOUNDARY_PATTERN",
    "DiffOperation",
    "DiffResult",
    "DiffGenerator",
    "DiffWriter",
    "PlainTextWriter",
    "ColorWriter",
    "Colors16Writer",
    "Colors256Writer",
    "Colors16MillionWriter",
    "OpPosition",
    "WordCursor",
    "WordSpan",
    "create_writer",
    "diff_chars",
    "diff_strings",
    "merge_word_deltas",
]
