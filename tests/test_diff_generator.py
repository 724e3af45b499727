import pytest

from alignpack.core.types import TERMINAL_ENCODINGS
from alignpack.diff import EOS_MARKER, DiffGenerator, DiffOperation, diff_strings


def test_single_character_change_is_aligned_on_one_line() -> None:
    result = diff_strings("int[6]", "int[5]")

    assert result.actual_lines == ("int[6 ]\\0",)
    assert result.diff_lines == ("    -+   ",)
    assert result.expected_lines == ("int[ 5]\\0",)
    assert result.identical is False


def test_identical_values_render_one_unmarked_line() -> None:
    result = diff_strings("same", "same")

    assert result.actual_lines == ("same\\0",)
    assert result.expected_lines == ("same\\0",)
    assert result.diff_lines == ("      ",)
    assert result.identical is True


def test_fully_different_word_is_replaced_as_a_whole() -> None:
    result = diff_strings("actual", "expected")

    assert result.actual_lines == ("actual        \\0",)
    assert result.diff_lines == ("------++++++++  ",)
    assert result.expected_lines == ("      expected\\0",)


def test_fragmented_word_edits_are_merged() -> None:
    operations = DiffGenerator().operations("I lices dogs", "I like dogs")

    assert operations == [
        DiffOperation.equal("I "),
        DiffOperation.delete("lices"),
        DiffOperation.insert("like"),
        DiffOperation.equal(" dogs\\0"),
    ]


def test_operations_end_with_the_end_of_string_marker() -> None:
    operations = DiffGenerator().operations("abc", "abc")

    assert operations == [DiffOperation.equal("abc" + EOS_MARKER)]


def test_trailing_whitespace_difference_stays_visible() -> None:
    result = diff_strings("a ", "a")

    assert result.actual_lines == ("a \\0",)
    assert result.diff_lines == (" -  ",)
    assert result.expected_lines == ("a \\0",)
    assert result.identical is False


def test_changed_line_in_multiline_value() -> None:
    result = diff_strings("1\n2\n3\n4\n5", "1\n2\n9\n4\n5")

    assert result.actual_lines == ("1\\n", "2\\n", "3 \\n", "4\\n", "5\\0")
    assert result.diff_lines == ("   ", "   ", "-+  ", "   ", "   ")
    assert result.expected_lines == ("1\\n", "2\\n", " 9\\n", "4\\n", "5\\0")


def test_removed_leading_newlines_keep_both_sides_aligned() -> None:
    result = diff_strings("\n\nvalue", "value")

    assert result.actual_lines == ("\\n       ", "\\n", "value\\0")
    assert result.diff_lines == ("--       ", "--", "       ")
    assert result.expected_lines == ("  value\\0", "  ", "       ")


@pytest.mark.parametrize("encoding", TERMINAL_ENCODINGS)
@pytest.mark.parametrize(
    ("actual", "expected"),
    [
        ("int[6]", "int[5]"),
        ("\n\nvalue", "value"),
        ("1\n2\n3\n4\n5", "1\n2\n9\n4\n5"),
        ("line one\nline two", "line one\r\nline 2\nline three"),
    ],
)
def test_line_counts_match_for_every_encoding(encoding: str, actual: str, expected: str) -> None:
    result = diff_strings(actual, expected, encoding=encoding)

    assert len(result.actual_lines) == len(result.expected_lines)
    for actual_line, expected_line in zip(result.actual_lines, result.expected_lines):
        assert len(result.visible_text(actual_line)) == len(result.visible_text(expected_line))
    if encoding == "plain-text":
        assert len(result.diff_lines) == len(result.actual_lines)
    else:
        assert result.diff_lines == ()


def test_generator_normalizes_encoding_alias() -> None:
    assert DiffGenerator("16m").encoding == "16-million-colors"


def test_generator_rejects_non_string_values() -> None:
    with pytest.raises(TypeError, match="actual must be a str"):
        diff_strings(1, "1")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="expected must be a str"):
        diff_strings("1", None)  # type: ignore[arg-type]
