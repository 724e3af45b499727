import pytest

from alignpack.diff import DiffOperation, diff_strings


def test_operation_kind_must_be_known() -> None:
    with pytest.raises(ValueError, match="Unsupported operation kind: replace"):
        DiffOperation("replace", "x")  # type: ignore[arg-type]


def test_operation_helpers_build_each_kind() -> None:
    assert DiffOperation.equal("a").to_dict() == {"kind": "equal", "text": "a"}
    assert DiffOperation.delete("b").kind == "delete"
    assert DiffOperation.insert("c").kind == "insert"


def test_result_to_dict_includes_line_ends() -> None:
    payload = diff_strings("a\nb", "a\nb").to_dict()

    assert payload["actual_lines"] == ["a\\n", "b\\0"]
    assert payload["actual_line_ends"] == [True, True]
    assert payload["expected_line_ends"] == [True, True]
    assert payload["padding_marker"] == " "
