# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for SARIF logs."""

from __future__ import annotations

from collections import Counter

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sarifconv import __version__
from sarifconv.core.constants import LEVEL_WEIGHTS, SarifLevel
from sarifconv.models.sarif import SarifLocation, SarifLog, SarifRun

console = Console()

LEVEL_COLORS = {
    SarifLevel.ERROR: "bold red",
    SarifLevel.WARNING: "yellow",
    SarifLevel.NOTE: "cyan",
    SarifLevel.NONE: "dim",
}


def describe_location(location: SarifLocation) -> str:
    physical = location.physicalLocation
    text = physical.artifactLocation.uri
    if physical.region is not None:
        text += f":{physical.region.startLine}"
        if physical.region.startColumn is not None:
            text += f":{physical.region.startColumn}"
    return text


def _format_run(run: SarifRun, out: Console) -> None:
    driver = run.tool.driver
    title = driver.name if not driver.version else f"{driver.name} {driver.version}"
    out.print(f"[bold]{escape(title)}[/bold]  {len(run.results)} result(s), {len(driver.rules)} rule(s)")
    out.print()

    if not run.results:
        out.print("  No results.", style="bold green")
        out.print()
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Level", no_wrap=True)
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Location", no_wrap=True)
    table.add_column("Message")

    for result in run.results:
        location = describe_location(result.locations[0]) if result.locations else "-"
        table.add_row(
            Text(result.level.upper(), style=LEVEL_COLORS.get(result.level, "white")),
            Text(result.ruleId),
            Text(location),
            Text(result.message.text),
        )
    out.print(table)

    counts = Counter(result.level for result in run.results)
    parts = [
        f"{counts[level]} {level}"
        for level in sorted(counts, key=lambda lv: LEVEL_WEIGHTS[lv], reverse=True)
    ]
    out.print(f"  Summary: {', '.join(parts)}")
    out.print()


def format_sarif_log(log: SarifLog, out: Console | None = None) -> None:
    """Print every run of a SARIF log as a results table."""
    out = out or console
    out.print()
    out.print(f"[bold]sarifconv v{__version__}[/bold] - SARIF {escape(log.version)}")
    out.print()
    if not log.runs:
        out.print("  Log contains no runs.", style="dim")
        return
    for run in log.runs:
        _format_run(run, out)
