# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Convert ``hadolint -f json`` output to SARIF."""

from __future__ import annotations

from collections.abc import Iterator

from sarifconv.converters.base import BaseConverter, load_json, validate_record
from sarifconv.converters.registry import converter
from sarifconv.core.constants import HADOLINT_WIKI_URI, SHELLCHECK_WIKI_URI, Tool
from sarifconv.core.exceptions import ParseError
from sarifconv.mapping.severity import map_level
from sarifconv.models.native import HadolintDiagnostic
from sarifconv.models.sarif import SarifMessage, SarifResult, SarifRule


def rule_help_uri(code: str) -> str | None:
    """Hadolint reports its own ``DL`` rules and embedded ShellCheck ``SC`` rules."""
    if code.startswith("DL"):
        return f"{HADOLINT_WIKI_URI}/{code}"
    if code.startswith("SC"):
        return f"{SHELLCHECK_WIKI_URI}/{code}"
    return None


@converter
class HadolintConverter(BaseConverter):
    tool = Tool.HADOLINT

    def iter_results(self, text: str) -> Iterator[tuple[SarifResult, SarifRule]]:
        if not text.strip():
            return
        data = load_json(text, "hadolint")
        if not isinstance(data, list):
            raise ParseError("Expected a JSON array of hadolint diagnostics", excerpt=text)

        for index, item in enumerate(data):
            record = validate_record(HadolintDiagnostic, item, what="hadolint diagnostic", index=index)
            location = self.location(record.file, record.line, record.column)
            result = SarifResult(
                ruleId=record.code,
                level=map_level(self.tool, record.level),
                message=SarifMessage(text=record.message or record.code),
                locations=[location] if location else [],
            )
            rule = SarifRule(id=record.code, name=record.code, helpUri=rule_help_uri(record.code))
            yield result, rule
