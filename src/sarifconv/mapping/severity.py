# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Native severity vocabularies mapped to SARIF levels."""

from __future__ import annotations

import logging

from sarifconv.core.constants import DEFAULT_LEVEL, SarifLevel, Tool

logger = logging.getLogger(__name__)

CLIPPY_LEVELS: dict[str, SarifLevel] = {
    "error": SarifLevel.ERROR,
    "error: internal compiler error": SarifLevel.ERROR,
    "warning": SarifLevel.WARNING,
    "note": SarifLevel.NOTE,
    "help": SarifLevel.NOTE,
    "failure-note": SarifLevel.NOTE,
}

HADOLINT_LEVELS: dict[str, SarifLevel] = {
    "error": SarifLevel.ERROR,
    "warning": SarifLevel.WARNING,
    "info": SarifLevel.NOTE,
    "style": SarifLevel.NOTE,
    "ignore": SarifLevel.NONE,
    "none": SarifLevel.NONE,
}

SHELLCHECK_LEVELS: dict[str, SarifLevel] = {
    "error": SarifLevel.ERROR,
    "warning": SarifLevel.WARNING,
    "info": SarifLevel.NOTE,
    "style": SarifLevel.NOTE,
}

CLANG_TIDY_LEVELS: dict[str, SarifLevel] = {
    "fatal error": SarifLevel.ERROR,
    "error": SarifLevel.ERROR,
    "warning": SarifLevel.WARNING,
    "note": SarifLevel.NOTE,
    "remark": SarifLevel.NOTE,
}

LEVEL_TABLES: dict[Tool, dict[str, SarifLevel]] = {
    Tool.CLIPPY: CLIPPY_LEVELS,
    Tool.HADOLINT: HADOLINT_LEVELS,
    Tool.SHELLCHECK: SHELLCHECK_LEVELS,
    Tool.CLANG_TIDY: CLANG_TIDY_LEVELS,
}


def map_level(tool: Tool | str, token: object) -> SarifLevel:
    """Return the SARIF level for a tool's native severity token.

    Tokens are matched case-insensitively after trimming. Anything outside
    the tool's vocabulary, including ``None``, resolves to ``warning`` so a
    missing severity never blocks emission of a finding.
    """
    table = LEVEL_TABLES.get(Tool(tool), {})
    key = str(token).strip().lower() if token is not None else ""
    level = table.get(key)
    if level is None:
        logger.debug(
            "Unknown severity %r, defaulting to %s", token, DEFAULT_LEVEL,
            extra={"tool": str(tool)},
        )
        return DEFAULT_LEVEL
    return level
