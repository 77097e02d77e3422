# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and SARIF constants."""

from enum import StrEnum


class SarifLevel(StrEnum):
    NONE = "none"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


class Tool(StrEnum):
    CLIPPY = "clippy"
    HADOLINT = "hadolint"
    SHELLCHECK = "shellcheck"
    CLANG_TIDY = "clang-tidy"


SARIF_VERSION = "2.1.0"
SARIF_SCHEMA_URI = "https://json.schemastore.org/sarif-2.1.0.json"

DEFAULT_LEVEL = SarifLevel.WARNING

# Higher wins when picking the worst level in a log.
LEVEL_WEIGHTS: dict[SarifLevel, int] = {
    SarifLevel.ERROR: 3,
    SarifLevel.WARNING: 2,
    SarifLevel.NOTE: 1,
    SarifLevel.NONE: 0,
}

TOOL_INFORMATION_URIS: dict[Tool, str] = {
    Tool.CLIPPY: "https://rust-lang.github.io/rust-clippy/",
    Tool.HADOLINT: "https://github.com/hadolint/hadolint",
    Tool.SHELLCHECK: "https://www.shellcheck.net",
    Tool.CLANG_TIDY: "https://clang.llvm.org/extra/clang-tidy/",
}

CLIPPY_LINT_INDEX_URI = "https://rust-lang.github.io/rust-clippy/master/index.html"
HADOLINT_WIKI_URI = "https://github.com/hadolint/hadolint/wiki"
SHELLCHECK_WIKI_URI = "https://www.shellcheck.net/wiki"
CLANG_TIDY_CHECKS_URI = "https://clang.llvm.org/extra/clang-tidy/checks"
