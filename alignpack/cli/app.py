import json
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from dataclasses import dataclass
from typing import Any

import typer

from alignpack.context import ContextRenderer, format_context
from alignpack.core.config import DiffConfig
from alignpack.core.exceptions import DiffConfigError
from alignpack.core.types import TERMINAL_ENCODING_ALIASES, TERMINAL_ENCODINGS
from alignpack.diff import DiffGenerator

app = typer.Typer(help="AlignKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("alignkit")
    except PackageNotFoundError:
        from alignpack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show AlignKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=False)


def _read_value(argument: str, *, from_file: bool) -> str:
    if not from_file:
        return argument
    return Path(argument).read_text(encoding="utf-8")


def _resolve_config(encoding: str | None, *, no_diff: bool) -> DiffConfig:
    config = DiffConfig.from_env()
    if encoding is not None:
        config = config.with_encoding(encoding)
    if no_diff:
        config = config.without_diff()
    return config


@app.command()
def diff(
    actual: str = typer.Argument(..., help="Actual value (or path with --files)."),
    expected: str = typer.Argument(..., help="Expected value (or path with --files)."),
    files: bool = typer.Option(
        False,
        "--files",
        help="Read ACTUAL and EXPECTED as UTF-8 text files.",
    ),
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        help="Terminal encoding: plain-text, 16-colors, 256-colors or 16-million-colors.",
    ),
    no_diff: bool = typer.Option(
        False,
        "--no-diff",
        help="Print both values without computing a diff.",
    ),
    actual_name: str = typer.Option("Actual", "--actual-name", help="Label of the actual value."),
    expected_name: str = typer.Option(
        "Expected",
        "--expected-name",
        help="Label of the expected value.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
) -> None:
    """Show how ACTUAL differs from EXPECTED."""
    try:
        config = _resolve_config(encoding, no_diff=no_diff)
    except DiffConfigError as error:
        message = f"diff failed: {error}"
        if json_output:
            _echo_json({"status": "error", "exit_code": 2, "message": message})
        else:
            _echo(message, err=True)
        raise typer.Exit(code=2) from error

    try:
        actual_value = _read_value(actual, from_file=files)
        expected_value = _read_value(expected, from_file=files)
    except OSError as error:
        message = f"diff failed: {error}"
        if json_output:
            _echo_json({"status": "error", "exit_code": 1, "message": message})
        else:
            _echo(message, err=True)
        raise typer.Exit(code=1) from error

    result = None
    if config.diff_enabled:
        result = DiffGenerator(config.terminal_encoding).diff(actual_value, expected_value)
    context = ContextRenderer(config).render(
        actual_name,
        actual_value,
        expected_name,
        expected_value,
    )

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "identical": (
                    result.identical if result is not None else actual_value == expected_value
                ),
                "encoding": config.terminal_encoding,
                "diff_enabled": config.diff_enabled,
                "result": result.to_dict() if result is not None else None,
                "context": [line.to_dict() for line in context],
            }
        )
        return

    _echo(format_context(context))


@app.command()
def encodings(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable encoding list.",
    ),
) -> None:
    """List supported terminal encodings."""
    aliases: dict[str, list[str]] = {name: [] for name in TERMINAL_ENCODINGS}
    for alias, name in sorted(TERMINAL_ENCODING_ALIASES.items()):
        aliases[name].append(alias)

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "encodings": [
                    {"name": name, "aliases": aliases[name]} for name in TERMINAL_ENCODINGS
                ],
            }
        )
        return

    for name in TERMINAL_ENCODINGS:
        if aliases[name]:
            _echo(f"{name} ({', '.join(aliases[name])})")
        else:
            _echo(name)


def main() -> None:
    app()
