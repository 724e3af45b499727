"""Character-level shortest edit script."""

from __future__ import annotations

from diff_match_patch import diff_match_patch

from alignpack.core.types import OperationKind
from alignpack.diff.models import DiffOperation

_KIND_BY_OP: dict[int, OperationKind] = {
    diff_match_patch.DIFF_EQUAL: "equal",
    diff_match_patch.DIFF_DELETE: "delete",
    diff_match_patch.DIFF_INSERT: "insert",
}


def diff_chars(actual: str, expected: str) -> list[DiffOperation]:
    """Return a minimal edit script turning ``actual`` into ``expected``.

    Runs of the same kind are coalesced and, within each run of changes,
    deletions come before insertions.
    """
    _require_str(actual, "actual")
    _require_str(expected, "expected")

    engine = diff_match_patch()
    # No deadline: a timed-out diff is valid but no longer minimal.
    engine.Diff_Timeout = 0
    return [
        DiffOperation(_KIND_BY_OP[op], text)
        for op, text in engine.diff_main(actual, expected, False)
        if text
    ]


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
