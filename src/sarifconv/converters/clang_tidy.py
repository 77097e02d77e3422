# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Convert clang-tidy's plain-text diagnostics to SARIF.

clang-tidy interleaves diagnostic lines with source excerpts, caret
markers and progress/summary chatter. Only lines of the form::

    path/to/file.cpp:42:3: warning: unused variable 'x' [misc-unused-variable]

are diagnostics; everything else is skipped. ``note:`` lines elaborate on
the diagnostic before them and become its related locations.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from sarifconv.converters.base import BaseConverter
from sarifconv.converters.registry import converter
from sarifconv.core.constants import CLANG_TIDY_CHECKS_URI, Tool
from sarifconv.core.exceptions import ParseError
from sarifconv.mapping.severity import map_level
from sarifconv.models.native import ClangTidyDiagnostic
from sarifconv.models.sarif import SarifMessage, SarifResult, SarifRule

logger = logging.getLogger(__name__)

DIAGNOSTIC_RE = re.compile(
    r"^(?P<file>.+?):(?P<line>\d+):(?P<column>\d+):\s+"
    r"(?P<severity>fatal error|error|warning|note|remark):\s+"
    r"(?P<message>.*?)"
    r"(?:\s+\[(?P<checks>[A-Za-z][\w.\-]*(?:,[\w.\-]+)*)\])?\s*$"
)

# Lines clang-tidy prints besides diagnostics and source excerpts.
SUMMARY_RE = re.compile(
    r"^(?:\d+ (?:warning|error)s?(?: and \d+ (?:warning|error)s?)? generated\."
    r"|Suppressed \d+ warnings?"
    r"|Use -header-filter="
    r"|Use -system-headers"
    r"|Error while processing "
    r"|Found compiler errors?"
    r"|Running without flags\."
    r"|Error while trying to load a compilation database"
    r"|\[\d+/\d+\] Processing file )"
)

CHECK_GROUPS = frozenset({
    "abseil", "altera", "android", "boost", "bugprone", "cert", "concurrency",
    "cppcoreguidelines", "darwin", "fuchsia", "google", "hicpp", "linuxkernel",
    "llvm", "llvmlibc", "misc", "modernize", "mpi", "objc", "openmp",
    "performance", "portability", "readability", "zircon",
})


def check_help_uri(check: str) -> str | None:
    if check.startswith("clang-analyzer-"):
        return f"{CLANG_TIDY_CHECKS_URI}/clang-analyzer/{check.removeprefix('clang-analyzer-')}.html"
    group, _, name = check.partition("-")
    if group in CHECK_GROUPS and name:
        return f"{CLANG_TIDY_CHECKS_URI}/{group}/{name}.html"
    return None


@converter
class ClangTidyConverter(BaseConverter):
    tool = Tool.CLANG_TIDY

    def iter_results(self, text: str) -> Iterator[tuple[SarifResult, SarifRule]]:
        pending: tuple[SarifResult, SarifRule] | None = None
        for diagnostic in self._parse(text):
            if diagnostic.severity == "note" and pending is not None:
                self._attach_note(pending[0], diagnostic)
                continue
            if pending is not None:
                yield pending
            pending = self._result(diagnostic)
        if pending is not None:
            yield pending

    def _parse(self, text: str) -> list[ClangTidyDiagnostic]:
        diagnostics: list[ClangTidyDiagnostic] = []
        recognized = False
        first_content: tuple[int, str] | None = None

        for line_no, line in enumerate(text.splitlines(), start=1):
            match = DIAGNOSTIC_RE.match(line)
            if match is None:
                if SUMMARY_RE.match(line.strip()):
                    recognized = True
                elif line.strip() and first_content is None:
                    first_content = (line_no, line)
                continue
            checks = match.group("checks")
            diagnostics.append(
                ClangTidyDiagnostic(
                    file=match.group("file"),
                    line=int(match.group("line")),
                    column=int(match.group("column")),
                    severity=match.group("severity"),
                    message=match.group("message"),
                    checks=checks.split(",") if checks else [],
                    source_line=line_no,
                )
            )

        if not diagnostics and not recognized and first_content is not None:
            line_no, line = first_content
            raise ParseError("No clang-tidy diagnostics found in input", line=line_no, excerpt=line)
        return diagnostics

    def _result(self, diagnostic: ClangTidyDiagnostic) -> tuple[SarifResult, SarifRule]:
        # "-warnings-as-errors" and similar pseudo-checks are not rule ids.
        checks = [c for c in diagnostic.checks if not c.startswith("-")]
        rule_id = checks[0] if checks else f"clang-diagnostic-{diagnostic.severity.replace(' ', '-')}"
        location = self.location(diagnostic.file, diagnostic.line, diagnostic.column)

        properties = None
        if len(diagnostic.checks) > 1:
            properties = {"checks": diagnostic.checks}

        result = SarifResult(
            ruleId=rule_id,
            level=map_level(self.tool, diagnostic.severity),
            message=SarifMessage(text=diagnostic.message or rule_id),
            locations=[location] if location else [],
            properties=properties,
        )
        rule = SarifRule(id=rule_id, name=rule_id, helpUri=check_help_uri(rule_id))
        return result, rule

    def _attach_note(self, result: SarifResult, note: ClangTidyDiagnostic) -> None:
        location = self.location(note.file, note.line, note.column, message=note.message)
        if location is None:
            return
        if result.relatedLocations is None:
            result.relatedLocations = []
        result.relatedLocations.append(location)
