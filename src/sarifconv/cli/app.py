# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Any

import typer

from sarifconv.core.constants import Tool
from sarifconv.core.exceptions import ConversionError

app = typer.Typer(
    name="sarifconv",
    help="Convert linter diagnostics (clippy, hadolint, shellcheck, clang-tidy) into SARIF 2.1.0",
    no_args_is_help=True,
)

InputArg = Annotated[
    Path | None,
    typer.Argument(help="Tool output file; reads stdin if none is given"),
]
OutputOpt = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Output file; writes to stdout if none is given"),
]
ToolVersionOpt = Annotated[
    str | None,
    typer.Option("--tool-version", help="Version of the tool that produced the input"),
]
CiModeOpt = Annotated[
    bool,
    typer.Option("--ci-mode", help="Enable CI mode with standardized exit codes"),
]


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (default from settings)")
    ] = None,
    log_format: Annotated[
        str | None, typer.Option("--log-format", help="Log format: text or json")
    ] = None,
) -> None:
    from sarifconv.core.config import get_settings
    from sarifconv.core.exceptions import ConfigurationError
    from sarifconv.core.logging import setup_logging

    try:
        settings = get_settings()
        setup_logging(log_level or settings.log_level, log_format or settings.log_format)
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


@app.command()
def clippy(
    input_file: InputArg = None,
    output: OutputOpt = None,
    tool_version: ToolVersionOpt = None,
    ci_mode: CiModeOpt = False,
) -> None:
    """Convert 'cargo clippy --message-format=json' output."""
    _run_conversion(Tool.CLIPPY, input_file, output, tool_version=tool_version, ci_mode=ci_mode)


@app.command()
def hadolint(
    input_file: InputArg = None,
    output: OutputOpt = None,
    tool_version: ToolVersionOpt = None,
    ci_mode: CiModeOpt = False,
) -> None:
    """Convert 'hadolint -f json' output."""
    _run_conversion(Tool.HADOLINT, input_file, output, tool_version=tool_version, ci_mode=ci_mode)


@app.command()
def shellcheck(
    input_file: InputArg = None,
    output: OutputOpt = None,
    tool_version: ToolVersionOpt = None,
    ci_mode: CiModeOpt = False,
) -> None:
    """Convert 'shellcheck -f json' or '-f json1' output."""
    _run_conversion(Tool.SHELLCHECK, input_file, output, tool_version=tool_version, ci_mode=ci_mode)


@app.command(name="clang-tidy")
def clang_tidy(
    input_file: InputArg = None,
    output: OutputOpt = None,
    tool_version: ToolVersionOpt = None,
    ci_mode: CiModeOpt = False,
) -> None:
    """Convert clang-tidy's plain-text diagnostics."""
    _run_conversion(Tool.CLANG_TIDY, input_file, output, tool_version=tool_version, ci_mode=ci_mode)


@app.command(name="convert")
def convert_cmd(
    tool: Annotated[Tool, typer.Option("--tool", "-t", help="Tool that produced the input")],
    input_file: InputArg = None,
    output: OutputOpt = None,
    tool_version: ToolVersionOpt = None,
    ci_mode: CiModeOpt = False,
) -> None:
    """Convert the output of the tool named by --tool."""
    _run_conversion(tool, input_file, output, tool_version=tool_version, ci_mode=ci_mode)


def _run_conversion(
    tool: Tool,
    input_file: Path | None,
    output: Path | None,
    *,
    tool_version: str | None,
    ci_mode: bool,
    **options: Any,
) -> None:
    from sarifconv.ci.exit_codes import CIExitCode, log_to_exit_code
    from sarifconv.core.config import get_settings
    from sarifconv.sdk import convert
    from sarifconv.serialization import to_json

    settings = get_settings()
    raw = _read_input(input_file)
    try:
        log = convert(tool, raw, settings=settings, version=tool_version, **options)
    except ConversionError as exc:
        typer.echo(f"Error: {tool} output could not be converted: {exc}", err=True)
        raise typer.Exit(int(CIExitCode.CONVERSION_ERROR) if ci_mode else 1) from exc

    _write_output(to_json(log, indent=settings.json_indent or None), output)

    if ci_mode:
        raise typer.Exit(int(log_to_exit_code(log)))


@app.command(name="fmt")
def fmt_cmd(input_file: InputArg = None) -> None:
    """Pretty-print a SARIF log as a results table."""
    from sarifconv.cli.formatters.console import format_sarif_log
    from sarifconv.serialization import from_json

    try:
        log = from_json(_read_input(input_file))
    except ConversionError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    format_sarif_log(log)


@app.command()
def merge(
    inputs: Annotated[list[Path], typer.Argument(help="SARIF files to merge")],
    output: OutputOpt = None,
) -> None:
    """Merge several SARIF logs into one log holding all their runs."""
    from sarifconv.core.config import get_settings
    from sarifconv.serialization import from_json, merge_logs, to_json

    settings = get_settings()
    logs = []
    for path in inputs:
        try:
            logs.append(from_json(path.read_bytes()))
        except ConversionError as exc:
            typer.echo(f"Error: {path}: {exc}", err=True)
            raise typer.Exit(1) from exc
    _write_output(to_json(merge_logs(logs), indent=settings.json_indent or None), output)


@app.command()
def tools() -> None:
    """List the tools that have a registered converter."""
    from rich.console import Console
    from rich.table import Table

    from sarifconv.converters import ConverterRegistry

    table = Table(title="Converters")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Converter")
    for converter_class in ConverterRegistry.get_all():
        table.add_row(str(converter_class.tool), converter_class.__name__)
    Console().print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from sarifconv import __version__

    typer.echo(f"sarifconv v{__version__}")


def _read_input(input_file: Path | None) -> bytes:
    if input_file is None:
        return sys.stdin.buffer.read()
    try:
        return input_file.read_bytes()
    except OSError as exc:
        typer.echo(f"Cannot read {input_file}: {exc.strerror}", err=True)
        raise typer.Exit(1) from exc


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text + "\n")
        typer.echo(f"Output written to {output}", err=True)
    else:
        sys.stdout.write(text + "\n")
