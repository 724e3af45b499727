import inspect

import pytest

import alignkit


def test_public_api_symbol_list_is_explicit_and_stable() -> None:
    assert alignkit.__all__ == [
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


def test_public_api_function_signatures_and_annotations() -> None:
    expected_parameter_order = {
        "diff": ("actual", "expected", "encoding"),
        "render_context": (
            "actual",
            "expected",
            "actual_name",
            "expected_name",
            "config",
            "expected_in_message",
        ),
        "describe_difference": (
            "actual",
            "expected",
            "actual_name",
            "expected_name",
            "config",
            "expected_in_message",
        ),
    }

    for name, parameters in expected_parameter_order.items():
        function = getattr(alignkit, name)
        signature = inspect.signature(function)
        assert tuple(signature.parameters.keys()) == parameters
        assert "return" in function.__annotations__
        assert function.__doc__ is not None
        assert function.__doc__.strip() != ""

        for index, parameter in enumerate(signature.parameters.values()):
            if index < 2:
                assert parameter.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD
                continue
            assert parameter.kind is inspect.Parameter.KEYWORD_ONLY


def test_core_workflow_works_via_public_api_only(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ALIGNKIT_TERMINAL_ENCODING", raising=False)
    monkeypatch.delenv("ALIGNKIT_DIFF_ENABLED", raising=False)

    result = alignkit.diff("int[6]", "int[5]")
    assert isinstance(result, alignkit.DiffResult)
    assert result.line_count == 1

    lines = alignkit.render_context("int[6]", "int[5]", actual_name="value")
    assert all(isinstance(line, alignkit.ContextLine) for line in lines)
    assert lines[1].key == "value"

    message = alignkit.describe_difference(
        True,
        False,
        config=alignkit.DiffConfig(),
        expected_in_message=True,
    )
    assert message == "Actual: True"


def test_public_api_errors_share_base_class() -> None:
    assert issubclass(alignkit.DiffConfigError, alignkit.AlignError)
    assert issubclass(alignkit.IllegalStateError, alignkit.AlignError)
    with pytest.raises(alignkit.DiffConfigError):
        alignkit.diff("a", "b", encoding="vga")
