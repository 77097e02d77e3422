# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the Clippy converter."""

from __future__ import annotations

import json

import pytest

from sarifconv.converters.clippy import ClippyConverter
from sarifconv.core.constants import SarifLevel
from sarifconv.core.exceptions import ParseError


def _message(
    *,
    spans: list[dict],
    code: str | None = "clippy::needless_return",
    level: str = "warning",
    text: str = "unneeded `return` statement",
) -> str:
    return json.dumps({
        "reason": "compiler-message",
        "package_id": "demo 0.1.0",
        "message": {
            "message": text,
            "code": {"code": code, "explanation": None} if code else None,
            "level": level,
            "spans": spans,
            "children": [],
            "rendered": None,
        },
    })


def _span(line: int | None, column: int | None, *, primary: bool, file_name: str = "file.rs", **extra) -> dict:
    span = {
        "file_name": file_name,
        "line_start": line,
        "line_end": line,
        "column_start": column,
        "column_end": column,
        "is_primary": primary,
        "label": None,
    }
    span.update(extra)
    return span


@pytest.fixture
def converter(settings) -> ClippyConverter:
    return ClippyConverter(settings)


class TestPrimaryAndSecondarySpans:
    def test_one_result_with_locations_in_primary_then_secondary_order(self, converter):
        raw = _message(spans=[_span(10, 5, primary=True), _span(12, 1, primary=False)])
        run = converter.convert_run(raw)

        assert len(run.results) == 1
        locations = run.results[0].locations
        assert len(locations) == 2
        first, second = (loc.physicalLocation for loc in locations)
        assert (first.artifactLocation.uri, first.region.startLine, first.region.startColumn) == ("file.rs", 10, 5)
        assert (second.artifactLocation.uri, second.region.startLine, second.region.startColumn) == ("file.rs", 12, 1)

    def test_primary_span_listed_first_even_if_reported_later(self, converter):
        raw = _message(spans=[_span(3, 1, primary=False), _span(8, 2, primary=True)])
        locations = converter.convert_run(raw).results[0].locations
        assert [loc.physicalLocation.region.startLine for loc in locations] == [8, 3]

    def test_span_label_becomes_location_message(self, converter):
        raw = _message(spans=[_span(1, 1, primary=True, label="here")])
        assert converter.convert_run(raw).results[0].locations[0].message.text == "here"


class TestFixtureOutput:
    def test_results_and_rules(self, settings, clippy_output):
        run = ClippyConverter(settings, version="0.1.78").convert_run(clippy_output)

        assert run.tool.driver.name == "clippy"
        assert run.tool.driver.version == "0.1.78"
        assert [r.ruleId for r in run.results] == [
            "clippy::needless_return",
            "unused_variables",
            "E0308",
            "clippy::needless_return",
        ]
        assert [r.id for r in run.tool.driver.rules] == [
            "clippy::needless_return",
            "unused_variables",
            "E0308",
        ]
        assert [r.ruleIndex for r in run.results] == [0, 1, 2, 0]

    def test_levels(self, settings, clippy_output):
        run = ClippyConverter(settings).convert_run(clippy_output)
        assert [r.level for r in run.results] == [
            SarifLevel.WARNING,
            SarifLevel.WARNING,
            SarifLevel.ERROR,
            SarifLevel.WARNING,
        ]

    def test_rule_help_uris(self, settings, clippy_output):
        rules = {r.id: r for r in ClippyConverter(settings).convert_run(clippy_output).tool.driver.rules}
        assert rules["clippy::needless_return"].helpUri.endswith("index.html#needless_return")
        assert rules["clippy::needless_return"].name == "needless_return"
        assert rules["E0308"].helpUri == "https://doc.rust-lang.org/error_codes/E0308.html"
        assert rules["E0308"].shortDescription.text == "Expected type did not match the received type."
        assert rules["unused_variables"].helpUri is None

    def test_windows_paths_are_normalized(self, settings, clippy_output):
        run = ClippyConverter(settings).convert_run(clippy_output)
        uri = run.results[1].locations[0].physicalLocation.artifactLocation.uri
        assert uri == "src/lib.rs"

    def test_children_kept_as_properties(self, settings, clippy_output):
        result = ClippyConverter(settings).convert_run(clippy_output).results[0]
        assert result.properties["children"][1] == {"message": "remove `return`", "level": "help"}

    def test_summary_messages_are_skipped(self, settings, clippy_output):
        run = ClippyConverter(settings).convert_run(clippy_output)
        assert all("warnings emitted" not in r.message.text for r in run.results)


class TestPositions:
    def test_malformed_span_is_dropped_but_result_kept(self, converter):
        raw = _message(spans=[
            _span(-4, 1, primary=True),
            _span(12, 1, primary=False),
        ])
        result = converter.convert_run(raw).results[0]
        assert [loc.physicalLocation.region.startLine for loc in result.locations] == [12]

    def test_only_malformed_spans_leaves_no_locations(self, converter):
        raw = _message(spans=[_span(9, 5, primary=True, line_end=2)])
        run = converter.convert_run(raw)
        assert len(run.results) == 1
        assert run.results[0].locations == []

    def test_byte_offsets_resolved_against_sources(self, settings):
        source = "fn main() {\n    return 1;\n}\n"
        start = source.index("return")
        span = _span(None, None, primary=True, file_name="src/main.rs", byte_start=start, byte_end=start + 6)
        converter = ClippyConverter(settings, sources={"src/main.rs": source})
        region = converter.convert_run(_message(spans=[span])).results[0].locations[0].physicalLocation.region
        assert (region.startLine, region.startColumn, region.endLine, region.endColumn) == (2, 5, 2, 11)

    def test_byte_offsets_without_source_are_omitted(self, converter):
        span = _span(None, None, primary=True, byte_start=4, byte_end=8)
        result = converter.convert_run(_message(spans=[span])).results[0]
        assert result.locations == []


class TestParsing:
    def test_invalid_json_line_is_a_parse_error_with_line_number(self, converter):
        raw = _message(spans=[]) + "\nnot json at all\n"
        with pytest.raises(ParseError) as exc_info:
            converter.convert(raw)
        assert exc_info.value.line == 2
        assert "not json" in exc_info.value.excerpt

    def test_non_object_line_is_a_parse_error(self, converter):
        with pytest.raises(ParseError):
            converter.convert("[1, 2, 3]\n")

    def test_compiler_message_missing_fields_is_a_parse_error(self, converter):
        with pytest.raises(ParseError):
            converter.convert('{"reason": "compiler-message", "message": {"level": "warning"}}')

    def test_blank_lines_and_other_reasons_ignored(self, converter):
        raw = '\n{"reason": "build-finished", "success": true}\n\n'
        run = converter.convert_run(raw)
        assert run.results == []
        assert run.tool.driver.rules == []

    def test_diagnostic_without_code_is_skipped(self, converter):
        raw = _message(spans=[_span(1, 1, primary=True)], code=None, text="aborting due to previous error")
        assert converter.convert_run(raw).results == []
