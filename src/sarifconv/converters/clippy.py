# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Convert ``cargo clippy --message-format=json`` output to SARIF."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any

from sarifconv.converters.base import BaseConverter, validate_record
from sarifconv.converters.registry import converter
from sarifconv.core.config import Settings
from sarifconv.core.constants import CLIPPY_LINT_INDEX_URI, Tool
from sarifconv.core.exceptions import LocationError, ParseError
from sarifconv.mapping.location import make_location, make_region, region_from_offsets
from sarifconv.mapping.severity import map_level
from sarifconv.models.native import CargoCompilerMessage, ClippyCode, ClippyDiagnostic, ClippySpan
from sarifconv.models.sarif import SarifLocation, SarifMessage, SarifResult, SarifRule

logger = logging.getLogger(__name__)

RUSTC_ERROR_CODE_RE = re.compile(r"^E\d{4}$")
RUSTC_ERROR_INDEX_URI = "https://doc.rust-lang.org/error_codes"


@converter
class ClippyConverter(BaseConverter):
    """Cargo emits one JSON object per line; only ``compiler-message``
    records carrying a lint or error code become results.

    ``sources`` maps artifact paths to their text. It is only consulted
    for spans that carry byte offsets but no line information.
    """

    tool = Tool.CLIPPY

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        version: str | None = None,
        sources: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(settings, version=version)
        self.sources = dict(sources or {})

    def iter_results(self, text: str) -> Iterator[tuple[SarifResult, SarifRule]]:
        for diagnostic in self._parse(text):
            if diagnostic.code is None or not diagnostic.code.code:
                logger.debug("Skipping diagnostic without a code: %s", diagnostic.message)
                continue
            rule_id = diagnostic.code.code
            result = SarifResult(
                ruleId=rule_id,
                level=map_level(self.tool, diagnostic.level),
                message=SarifMessage(text=diagnostic.message or rule_id),
                locations=self._locations(diagnostic.spans),
                properties=self._properties(diagnostic),
            )
            yield result, self._rule(diagnostic.code)

    def _parse(self, text: str) -> Iterator[ClippyDiagnostic]:
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as exc:
                raise ParseError(
                    f"Invalid cargo JSON message: {exc.msg}",
                    line=line_no,
                    excerpt=line,
                ) from exc
            if not isinstance(data, dict):
                raise ParseError("Expected a cargo JSON message object", line=line_no, excerpt=line)
            if data.get("reason") != "compiler-message":
                continue
            record = validate_record(
                CargoCompilerMessage, data, what="cargo compiler message", line=line_no
            )
            yield record.message

    def _locations(self, spans: list[ClippySpan]) -> list[SarifLocation]:
        # Primary spans first, then secondary spans, each group in source order.
        ordered = [s for s in spans if s.is_primary] + [s for s in spans if not s.is_primary]
        locations: list[SarifLocation] = []
        for span in ordered:
            location = self._span_location(span)
            if location is not None:
                locations.append(location)
        return locations

    def _span_location(self, span: ClippySpan) -> SarifLocation | None:
        try:
            if span.line_start is not None:
                region = make_region(
                    span.line_start, span.column_start, span.line_end, span.column_end
                )
            elif span.byte_start is not None and span.file_name in self.sources:
                region = region_from_offsets(
                    self.sources[span.file_name], span.byte_start, span.byte_end
                )
            else:
                logger.debug("Span in %s has no resolvable position", span.file_name)
                return None
        except LocationError as exc:
            self.log_dropped_location(span.file_name, exc)
            return None
        return make_location(span.file_name, region, span.label)

    @staticmethod
    def _properties(diagnostic: ClippyDiagnostic) -> dict[str, Any] | None:
        children: list[dict[str, str]] = []
        for child in diagnostic.children:
            if not child.message:
                continue
            entry = {"message": child.message}
            if child.level:
                entry["level"] = child.level
            children.append(entry)
        return {"children": children} if children else None

    @staticmethod
    def _rule(code: ClippyCode) -> SarifRule:
        lint = code.code
        name = lint.removeprefix("clippy::")
        help_uri: str | None = None
        if lint.startswith("clippy::"):
            help_uri = f"{CLIPPY_LINT_INDEX_URI}#{name}"
        elif RUSTC_ERROR_CODE_RE.match(lint):
            help_uri = f"{RUSTC_ERROR_INDEX_URI}/{lint}.html"

        short = None
        if code.explanation:
            first = next((ln for ln in code.explanation.splitlines() if ln.strip()), "")
            if first:
                short = SarifMessage(text=first.strip())

        return SarifRule(id=lint, name=name, shortDescription=short, helpUri=help_uri)
