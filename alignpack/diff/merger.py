"""Word-boundary merge of fragmented character edits.

At character granularity a word that changed substantially turns into a
string of tiny alternating deletes, inserts and one-letter matches. This
module rewrites each such word as a single delete followed by a single insert
while leaving words that differ by one or two edits untouched.

Word boundaries are only looked for in ``equal`` operations. A boundary is a
run of non-newline whitespace, one line terminator, or one of the characters
``. [ ] ( ) { } / \\ * + - #``.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterable

from alignpack.diff.models import DiffOperation

WORD_BOUNDARY_PATTERN = re.compile(r"\r?\n|[^\S\r\n]+|[.\[\](){}/\\*+\-#]")

# Words with at most this many edits keep their character-level diff.
MAX_EDITS_PER_WORD = 2


@dataclass(frozen=True, slots=True)
class OpPosition:
    """A character position inside an operation list: operation index plus offset into its text."""

    index: int
    offset: int


@dataclass(frozen=True, slots=True)
class WordSpan:
    """The extent of one word and where the following word begins."""

    start: OpPosition
    end: OpPosition
    next_start: OpPosition | None


class WordCursor:
    """Index-based cursor that walks words in a mutable operation list."""

    def __init__(self, operations: Iterable[DiffOperation]) -> None:
        self.operations: list[DiffOperation] = list(operations)

    @property
    def end_position(self) -> OpPosition:
        return OpPosition(len(self.operations), 0)

    def first_word_start(self) -> OpPosition:
        """Position right after the last boundary of a leading ``equal`` operation."""
        if not self.operations or self.operations[0].kind != "equal":
            return OpPosition(0, 0)
        last_match = None
        for last_match in WORD_BOUNDARY_PATTERN.finditer(self.operations[0].text):
            pass
        if last_match is None:
            return OpPosition(0, 0)
        return OpPosition(0, last_match.end())

    def find_word(self, start: OpPosition) -> WordSpan:
        """Locate the boundary ending the word that begins at ``start``."""
        for index in range(start.index, len(self.operations)):
            operation = self.operations[index]
            if operation.kind != "equal":
                continue
            search_from = start.offset if index == start.index else 0
            match = WORD_BOUNDARY_PATTERN.search(operation.text, search_from)
            if match is not None:
                return WordSpan(
                    start=start,
                    end=OpPosition(index, match.start()),
                    next_start=OpPosition(index, match.end()),
                )
        return WordSpan(start=start, end=self.end_position, next_start=None)

    def count_edits(self, span: WordSpan) -> int:
        """Number of delete/insert operations inside the span."""
        stop = min(span.end.index, len(self.operations))
        return sum(
            1
            for operation in self.operations[span.start.index : stop]
            if operation.kind != "equal"
        )

    def collapse(self, span: WordSpan) -> OpPosition | None:
        """Replace the span with one delete and one insert.

        Text of the first and last operations that falls outside the span stays
        as ``equal`` operations. Returns ``span.next_start`` translated to the
        rewritten list.
        """
        start = span.start
        end = span.end
        last_index = min(end.index, len(self.operations) - 1)

        deleted: list[str] = []
        inserted: list[str] = []
        for index in range(start.index, last_index + 1):
            operation = self.operations[index]
            low = start.offset if index == start.index else 0
            high = end.offset if index == end.index else len(operation.text)
            piece = operation.text[low:high]
            if operation.kind != "insert":
                deleted.append(piece)
            if operation.kind != "delete":
                inserted.append(piece)

        replacement: list[DiffOperation] = []
        prefix = self.operations[start.index].text[: start.offset]
        if prefix:
            replacement.append(DiffOperation.equal(prefix))
        deleted_text = "".join(deleted)
        if deleted_text:
            replacement.append(DiffOperation.delete(deleted_text))
        inserted_text = "".join(inserted)
        if inserted_text:
            replacement.append(DiffOperation.insert(inserted_text))
        suffix = ""
        if end.index < len(self.operations):
            suffix = self.operations[end.index].text[end.offset :]
            if suffix:
                replacement.append(DiffOperation.equal(suffix))

        self.operations[start.index : last_index + 1] = replacement

        if span.next_start is None:
            return None
        # The boundary sits inside the suffix, which is now the last replacement entry.
        return OpPosition(
            start.index + len(replacement) - 1,
            span.next_start.offset - end.offset,
        )


def merge_word_deltas(
    operations: Iterable[DiffOperation],
    *,
    max_edits_per_word: int = MAX_EDITS_PER_WORD,
) -> list[DiffOperation]:
    """Collapse words with more than ``max_edits_per_word`` edits into one delete and one insert."""
    cursor = WordCursor(operations)
    position: OpPosition | None = cursor.first_word_start()

    while position is not None:
        span = cursor.find_word(position)
        if cursor.count_edits(span) > max_edits_per_word:
            position = cursor.collapse(span)
        else:
            position = span.next_start

    return cursor.operations
