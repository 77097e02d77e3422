# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF log (de)serialization and merging."""

from __future__ import annotations

import json
from collections.abc import Iterable

from pydantic import ValidationError

from sarifconv.core.constants import SARIF_SCHEMA_URI, SARIF_VERSION
from sarifconv.core.exceptions import ParseError
from sarifconv.models.sarif import SarifLog, SarifRun


def to_json(log: SarifLog, *, indent: int | None = 2) -> str:
    """Serialize a SARIF log; unset optional properties are omitted."""
    return log.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def from_json(text: str | bytes) -> SarifLog:
    """Parse a SARIF document.

    Raises
    ------
    ParseError
        If *text* is not JSON or does not have the shape of a SARIF log.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid SARIF JSON: {exc.msg}",
            line=exc.lineno,
            offset=exc.pos,
            excerpt=exc.doc[exc.pos:],
        ) from exc
    try:
        return SarifLog.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Not a SARIF log: {exc.error_count()} validation error(s)\n{exc}") from exc


def make_log(runs: Iterable[SarifRun], *, schema_uri: str = SARIF_SCHEMA_URI) -> SarifLog:
    return SarifLog(schema_uri=schema_uri, version=SARIF_VERSION, runs=list(runs))


def merge_logs(logs: Iterable[SarifLog]) -> SarifLog:
    """Concatenate the runs of several logs into one, preserving order."""
    runs: list[SarifRun] = []
    for log in logs:
        runs.extend(log.runs)
    return make_log(runs)
