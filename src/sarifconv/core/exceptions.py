# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sarifconv."""

from __future__ import annotations

_EXCERPT_LIMIT = 120


class SarifConvError(Exception):
    """Base exception for all sarifconv errors."""


class ConfigurationError(SarifConvError):
    """Invalid or missing configuration."""


class ConversionError(SarifConvError):
    """A tool's output could not be converted to SARIF."""


class ParseError(ConversionError):
    """Raw tool output is not valid in the tool's native format.

    ``line`` is 1-based, ``offset`` is a character offset into the decoded
    input. Either may be ``None`` when the failure has no precise position.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        offset: int | None = None,
        excerpt: str = "",
    ) -> None:
        self.line = line
        self.offset = offset
        self.excerpt = excerpt[:_EXCERPT_LIMIT]
        super().__init__(message)

    def __str__(self) -> str:
        msg = super().__str__()
        where = []
        if self.line is not None:
            where.append(f"line {self.line}")
        if self.offset is not None:
            where.append(f"offset {self.offset}")
        if where:
            msg = f"{msg} ({', '.join(where)})"
        if self.excerpt:
            msg = f"{msg}: {self.excerpt!r}"
        return msg


class LocationError(SarifConvError):
    """A diagnostic's positional data is inconsistent."""


class SchemaError(SarifConvError):
    """An assembled run violates a SARIF structural invariant."""
