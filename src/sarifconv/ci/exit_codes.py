# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0 CLEAN: no result at warning level or above
    1 ERRORS: at least one error-level result
    2 CONVERSION_ERROR: the tool output could not be converted
    3 WARNINGS: warning-level results, but no errors
"""

from __future__ import annotations

from enum import IntEnum

from sarifconv.core.constants import LEVEL_WEIGHTS, SarifLevel
from sarifconv.models.sarif import SarifLog


class CIExitCode(IntEnum):
    """Exit codes used by sarifconv in CI mode."""

    CLEAN = 0
    ERRORS = 1
    CONVERSION_ERROR = 2
    WARNINGS = 3


_LEVEL_MAP: dict[SarifLevel, CIExitCode] = {
    SarifLevel.ERROR: CIExitCode.ERRORS,
    SarifLevel.WARNING: CIExitCode.WARNINGS,
    SarifLevel.NOTE: CIExitCode.CLEAN,
    SarifLevel.NONE: CIExitCode.CLEAN,
}


def worst_level(log: SarifLog) -> SarifLevel | None:
    """Return the most severe result level in *log*, or ``None`` if empty."""
    levels = [result.level for run in log.runs for result in run.results]
    if not levels:
        return None
    return max(levels, key=lambda level: LEVEL_WEIGHTS[level])


def level_to_exit_code(level: SarifLevel | str | None) -> CIExitCode:
    """Convert a SARIF level to a CI exit code.

    Raises:
        ValueError: If the level string is not a SARIF level.
    """
    if level is None:
        return CIExitCode.CLEAN
    try:
        normalized = SarifLevel(str(level).strip().lower())
    except ValueError:
        msg = f"Unknown level: {level!r}. Expected one of: {', '.join(SarifLevel)}"
        raise ValueError(msg) from None
    return _LEVEL_MAP[normalized]


def log_to_exit_code(log: SarifLog) -> CIExitCode:
    return level_to_exit_code(worst_level(log))
