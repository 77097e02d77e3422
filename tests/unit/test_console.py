# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the rich console formatter."""

from __future__ import annotations

from rich.console import Console

from sarifconv import convert
from sarifconv.cli.formatters.console import describe_location, format_sarif_log
from sarifconv.core.constants import SarifLevel
from sarifconv.mapping import make_location, make_region
from sarifconv.models.sarif import (
    SarifDriver,
    SarifLog,
    SarifMessage,
    SarifResult,
    SarifRule,
    SarifRun,
    SarifTool,
)


def _render(log: SarifLog) -> str:
    out = Console(record=True, width=200, color_system=None)
    format_sarif_log(log, out)
    return out.export_text()


def test_describe_location():
    location = make_location("src/main.rs", make_region(10, 5))
    assert describe_location(location) == "src/main.rs:10:5"
    assert describe_location(make_location("Dockerfile")) == "Dockerfile"


def test_results_table(hadolint_output):
    text = _render(convert("hadolint", hadolint_output))
    assert "hadolint" in text
    assert "DL3008" in text
    assert "Dockerfile:4:1" in text
    assert "Summary: 1 error" in text


def test_empty_run(settings):
    text = _render(convert("shellcheck", b"[]", settings=settings))
    assert "No results." in text


def test_log_without_runs():
    assert "Log contains no runs." in _render(SarifLog(runs=[]))


def _log_with_message(text: str, driver_name: str = "clippy") -> SarifLog:
    result = SarifResult(
        ruleId="clippy::bytes_nth",
        level=SarifLevel.WARNING,
        message=SarifMessage(text=text),
        locations=[make_location("src/lib.rs", make_region(3, 9))],
    )
    driver = SarifDriver(name=driver_name, rules=[SarifRule(id="clippy::bytes_nth")])
    return SarifLog(runs=[SarifRun(tool=SarifTool(driver=driver), results=[result])])


class TestBracketedText:
    def test_square_brackets_are_shown_verbatim(self):
        text = _render(_log_with_message("calling `as_bytes()` on a `&[u8]`"))
        assert "on a `&[u8]`" in text

    def test_closing_tag_in_message_does_not_break_rendering(self):
        text = _render(_log_with_message("unexpected closing [/b] tag"))
        assert "unexpected closing [/b] tag" in text

    def test_driver_name_with_brackets(self):
        text = _render(_log_with_message("m", driver_name="lint[/red]"))
        assert "lint[/red]" in text
