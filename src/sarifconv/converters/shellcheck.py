# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Convert ``shellcheck -f json`` / ``-f json1`` output to SARIF."""

from __future__ import annotations

from collections.abc import Iterator

from sarifconv.converters.base import BaseConverter, load_json, validate_record
from sarifconv.converters.registry import converter
from sarifconv.core.constants import SHELLCHECK_WIKI_URI, Tool
from sarifconv.core.exceptions import LocationError, ParseError
from sarifconv.mapping.location import make_region, normalize_uri
from sarifconv.mapping.severity import map_level
from sarifconv.models.native import ShellCheckComment, ShellCheckFix, ShellCheckJson1
from sarifconv.models.sarif import (
    SarifArtifactChange,
    SarifArtifactContent,
    SarifArtifactLocation,
    SarifFix,
    SarifMessage,
    SarifReplacement,
    SarifResult,
    SarifRule,
)


@converter
class ShellCheckConverter(BaseConverter):
    """Accepts both the bare array of ``-f json`` and the ``json1`` envelope."""

    tool = Tool.SHELLCHECK

    def iter_results(self, text: str) -> Iterator[tuple[SarifResult, SarifRule]]:
        for comment in self._parse(text):
            rule_id = f"SC{comment.code}"
            location = self.location(
                comment.file,
                comment.line,
                comment.column,
                comment.end_line,
                comment.end_column,
            )
            fix = None
            if comment.fix is not None and self.settings.include_fixes:
                fix = self._fix(comment.file, comment.fix)

            result = SarifResult(
                ruleId=rule_id,
                level=map_level(self.tool, comment.level),
                message=SarifMessage(text=comment.message or rule_id),
                locations=[location] if location else [],
                fixes=[fix] if fix else None,
            )
            rule = SarifRule(id=rule_id, name=rule_id, helpUri=f"{SHELLCHECK_WIKI_URI}/{rule_id}")
            yield result, rule

    def _parse(self, text: str) -> list[ShellCheckComment]:
        if not text.strip():
            return []
        data = load_json(text, "shellcheck")
        if isinstance(data, dict):
            envelope = validate_record(ShellCheckJson1, data, what="shellcheck json1 document")
            return envelope.comments
        if isinstance(data, list):
            return [
                validate_record(ShellCheckComment, item, what="shellcheck comment", index=i)
                for i, item in enumerate(data)
            ]
        raise ParseError("Expected a shellcheck JSON array or json1 object", excerpt=text)

    def _fix(self, uri: str, fix: ShellCheckFix) -> SarifFix | None:
        replacements: list[SarifReplacement] = []
        for replacement in fix.replacements:
            try:
                region = make_region(
                    replacement.line,
                    replacement.column,
                    replacement.end_line,
                    replacement.end_column,
                )
            except LocationError as exc:
                # All edits of a fix, or no fix.
                self.log_dropped_location(uri, exc)
                return None
            replacements.append(
                SarifReplacement(
                    deletedRegion=region,
                    insertedContent=(
                        SarifArtifactContent(text=replacement.replacement)
                        if replacement.replacement
                        else None
                    ),
                )
            )
        if not replacements:
            return None
        return SarifFix(
            artifactChanges=[
                SarifArtifactChange(
                    artifactLocation=SarifArtifactLocation(uri=normalize_uri(uri)),
                    replacements=replacements,
                )
            ]
        )
