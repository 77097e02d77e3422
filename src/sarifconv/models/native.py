# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic models for the native diagnostic records of each tool.

Positions are typed loosely (plain ``int``) on purpose: range checks belong
to the location mapper, which can recover from a bad position without
failing the whole conversion.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Clippy (cargo --message-format=json)
# ---------------------------------------------------------------------------


class ClippySpan(BaseModel):
    """A source span attached to a rustc/clippy diagnostic."""

    file_name: str
    byte_start: int | None = None
    byte_end: int | None = None
    line_start: int | None = None
    line_end: int | None = None
    column_start: int | None = None
    column_end: int | None = None
    is_primary: bool = False
    label: str | None = None


class ClippyCode(BaseModel):
    code: str
    explanation: str | None = None


class ClippyDiagnostic(BaseModel):
    message: str
    code: ClippyCode | None = None
    level: str | None = None
    spans: list[ClippySpan] = Field(default_factory=list)
    children: list[ClippyDiagnostic] = Field(default_factory=list)
    rendered: str | None = None


class CargoCompilerMessage(BaseModel):
    """A ``compiler-message`` record from cargo's JSON message stream."""

    reason: str
    package_id: str | None = None
    message: ClippyDiagnostic


# ---------------------------------------------------------------------------
# Hadolint (-f json)
# ---------------------------------------------------------------------------


class HadolintDiagnostic(BaseModel):
    code: str = Field(min_length=1)
    message: str
    level: str | None = None
    file: str | None = None
    line: int | None = None
    column: int | None = None


# ---------------------------------------------------------------------------
# ShellCheck (-f json / -f json1)
# ---------------------------------------------------------------------------


class ShellCheckReplacement(BaseModel):
    line: int
    column: int
    end_line: int = Field(alias="endLine")
    end_column: int = Field(alias="endColumn")
    replacement: str = ""
    precedence: int = 0
    insertion_point: str | None = Field(default=None, alias="insertionPoint")

    model_config = {"populate_by_name": True}


class ShellCheckFix(BaseModel):
    replacements: list[ShellCheckReplacement] = Field(default_factory=list)


class ShellCheckComment(BaseModel):
    file: str
    line: int | None = None
    end_line: int | None = Field(default=None, alias="endLine")
    column: int | None = None
    end_column: int | None = Field(default=None, alias="endColumn")
    level: str | None = None
    code: int
    message: str
    fix: ShellCheckFix | None = None

    model_config = {"populate_by_name": True}


class ShellCheckJson1(BaseModel):
    """The ``-f json1`` envelope."""

    comments: list[ShellCheckComment]


# ---------------------------------------------------------------------------
# Clang-Tidy (plain text)
# ---------------------------------------------------------------------------


class ClangTidyDiagnostic(BaseModel):
    """One ``path:line:column: severity: message [checks]`` line."""

    file: str
    line: int
    column: int
    severity: str
    message: str
    checks: list[str] = Field(default_factory=list)
    source_line: int = Field(description="1-based line of the diagnostic in the tool output")
