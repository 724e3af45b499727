from alignpack.context import ContextLine, format_context


def test_keys_are_padded_to_common_width() -> None:
    lines = [
        ContextLine("", ""),
        ContextLine("Actual", "a"),
        ContextLine("Diff", " -"),
        ContextLine("Expected", "b"),
    ]

    assert format_context(lines) == "\nActual  : a\nDiff    :  -\nExpected: b"


def test_empty_keys_contribute_value_only() -> None:
    lines = [ContextLine("Actual@0", "x"), ContextLine("", "[...]"), ContextLine("Actual@4", "y")]

    assert format_context(lines) == "Actual@0: x\n[...]\nActual@4: y"


def test_non_string_values_are_stringified() -> None:
    assert format_context([ContextLine("Actual", True), ContextLine("Expected", [1])]) == (
        "Actual  : True\nExpected: [1]"
    )


def test_empty_input_formats_to_empty_string() -> None:
    assert format_context([]) == ""


def test_context_line_str_and_dict() -> None:
    line = ContextLine("Actual", "x")

    assert str(line) == "Actual: x"
    assert str(ContextLine("", "[...]")) == "[...]"
    assert line.to_dict() == {"key": "Actual", "value": "x"}
