import pytest

from alignpack.core.config import (
    DIFF_ENABLED_ENV_VAR,
    TERMINAL_ENCODING_ENV_VAR,
    DiffConfig,
    normalize_terminal_encoding,
)
from alignpack.core.exceptions import AlignError, DiffConfigError


def test_defaults() -> None:
    config = DiffConfig()

    assert config.terminal_encoding == "plain-text"
    assert config.diff_enabled is True
    assert config.to_dict() == {
        "terminal_encoding": "plain-text",
        "diff_enabled": True,
        "string_converters": [],
    }


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("plain", "plain-text"),
        (" 16 ", "16-colors"),
        ("256_COLORS", "256-colors"),
        ("16m", "16-million-colors"),
        ("truecolor", "16-million-colors"),
    ],
)
def test_encoding_aliases_are_normalized(raw: str, expected: str) -> None:
    assert normalize_terminal_encoding(raw) == expected
    assert DiffConfig(terminal_encoding=raw).terminal_encoding == expected  # type: ignore[arg-type]


def test_unknown_encoding_raises_config_error() -> None:
    with pytest.raises(DiffConfigError) as error:
        DiffConfig(terminal_encoding="vga")  # type: ignore[arg-type]

    assert isinstance(error.value, AlignError)
    assert isinstance(error.value, ValueError)


def test_missing_encoding_raises_type_error() -> None:
    with pytest.raises(TypeError):
        normalize_terminal_encoding(None)


def test_non_boolean_diff_flag_is_rejected() -> None:
    with pytest.raises(DiffConfigError, match="diff_enabled"):
        DiffConfig(diff_enabled="yes")  # type: ignore[arg-type]


def test_copy_helpers_return_updated_configs() -> None:
    config = DiffConfig()

    assert config.with_encoding("256").terminal_encoding == "256-colors"
    assert config.without_diff().diff_enabled is False
    assert config.without_diff().with_diff().diff_enabled is True
    assert config.with_diff() is config
    assert config.terminal_encoding == "plain-text"


def test_string_converter_matches_exact_type_only() -> None:
    class Flag(int):
        pass

    config = DiffConfig().with_string_converter(int, lambda value: f"int:{value}")

    assert config.convert_to_string(3) == "int:3"
    assert config.convert_to_string(Flag(3)) == "3"
    assert config.to_dict()["string_converters"] == ["int"]


def test_non_callable_converter_is_rejected() -> None:
    with pytest.raises(DiffConfigError, match="callable"):
        DiffConfig(string_converters={int: "nope"})  # type: ignore[dict-item]


def test_from_env_reads_encoding_and_diff_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TERMINAL_ENCODING_ENV_VAR, "16m")
    monkeypatch.setenv(DIFF_ENABLED_ENV_VAR, "off")

    config = DiffConfig.from_env()

    assert config.terminal_encoding == "16-million-colors"
    assert config.diff_enabled is False


def test_from_env_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TERMINAL_ENCODING_ENV_VAR, raising=False)
    monkeypatch.delenv(DIFF_ENABLED_ENV_VAR, raising=False)

    assert DiffConfig.from_env() == DiffConfig()


def test_from_env_warns_and_falls_back_on_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv(TERMINAL_ENCODING_ENV_VAR, "vga")
    monkeypatch.setenv(DIFF_ENABLED_ENV_VAR, "maybe")

    with pytest.warns(RuntimeWarning) as records:
        config = DiffConfig.from_env()

    assert config.terminal_encoding == "plain-text"
    assert config.diff_enabled is True
    messages = [str(record.message) for record in records]
    assert any(TERMINAL_ENCODING_ENV_VAR in message for message in messages)
    assert any(DIFF_ENABLED_ENV_VAR in message for message in messages)
