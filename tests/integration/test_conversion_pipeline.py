# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""End-to-end conversion of captured tool output through serialization."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from sarifconv import convert, from_json, get_converter, merge_logs, to_json
from sarifconv.core.constants import SARIF_SCHEMA_URI, SarifLevel

FIXTURES = [
    ("clippy", "clippy_output"),
    ("hadolint", "hadolint_output"),
    ("shellcheck", "shellcheck_output"),
    ("shellcheck", "shellcheck_json1_output"),
    ("clang-tidy", "clang_tidy_output"),
]


@pytest.fixture(params=FIXTURES, ids=[fixture for _, fixture in FIXTURES])
def converted(request, settings):
    tool, fixture = request.param
    raw = request.getfixturevalue(fixture)
    return tool, convert(tool, raw, settings=settings)


class TestPipeline:
    def test_document_shape(self, converted):
        tool, log = converted
        data = json.loads(to_json(log))
        assert data["$schema"] == SARIF_SCHEMA_URI
        assert data["version"] == "2.1.0"
        assert len(data["runs"]) == 1
        assert data["runs"][0]["tool"]["driver"]["name"] == tool

    def test_rules_are_unique_and_indexed(self, converted):
        _, log = converted
        run = log.runs[0]
        ids = [rule.id for rule in run.tool.driver.rules]
        assert len(ids) == len(set(ids))
        for result in run.results:
            assert result.ruleId in ids
            assert run.tool.driver.rules[result.ruleIndex].id == result.ruleId

    def test_levels_are_sarif_levels(self, converted):
        _, log = converted
        assert all(result.level in set(SarifLevel) for result in log.runs[0].results)

    def test_serialized_form_survives_reparse(self, converted):
        _, log = converted
        assert from_json(to_json(log)) == log

    def test_no_null_members_in_output(self, converted):
        _, log = converted
        assert ": null" not in to_json(log)


class TestOrdering:
    def test_hadolint_order_preserved(self, settings, hadolint_output):
        log = convert("hadolint", hadolint_output, settings=settings)
        lines = [r.locations[0].physicalLocation.region.startLine for r in log.runs[0].results]
        assert lines == [1, 4, 6, 1, 9, 7]

    def test_clang_tidy_order_preserved(self, settings, clang_tidy_output):
        log = convert("clang-tidy", clang_tidy_output, settings=settings)
        lines = [r.locations[0].physicalLocation.region.startLine for r in log.runs[0].results]
        assert lines == [42, 57, 88, 91]


def test_merge_of_every_tool(settings, clippy_output, hadolint_output, shellcheck_output, clang_tidy_output):
    logs = [
        convert("clippy", clippy_output, settings=settings),
        convert("hadolint", hadolint_output, settings=settings),
        convert("shellcheck", shellcheck_output, settings=settings),
        convert("clang-tidy", clang_tidy_output, settings=settings),
    ]
    merged = from_json(to_json(merge_logs(logs)))
    assert [run.tool.driver.name for run in merged.runs] == [
        "clippy",
        "hadolint",
        "shellcheck",
        "clang-tidy",
    ]


def test_one_converter_shared_between_threads(settings, hadolint_output):
    converter = get_converter("hadolint", settings=settings)
    expected = to_json(converter.convert(hadolint_output))
    with ThreadPoolExecutor(max_workers=8) as pool:
        outputs = list(pool.map(lambda _: to_json(converter.convert(hadolint_output)), range(32)))
    assert all(output == expected for output in outputs)
