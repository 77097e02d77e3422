# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding sarifconv in other tools.

Usage::

    from sarifconv import convert, convert_shellcheck, to_json

    log = convert_shellcheck(raw_json_bytes)
    print(to_json(log))

    # Tool chosen at runtime
    log = convert("clang-tidy", clang_tidy_stdout)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sarifconv.converters import (
    ClangTidyConverter,
    ClippyConverter,
    ConverterRegistry,
    HadolintConverter,
    ShellCheckConverter,
)
from sarifconv.converters.base import BaseConverter
from sarifconv.core.config import Settings
from sarifconv.core.constants import Tool
from sarifconv.models.sarif import SarifLog

logger = logging.getLogger("sarifconv.sdk")


def get_converter(
    tool: Tool | str,
    *,
    settings: Settings | None = None,
    **options: Any,
) -> BaseConverter:
    """Instantiate the registered converter for *tool*.

    Extra keyword ``options`` go to the converter's constructor (``version``
    for every tool, ``sources`` for Clippy).

    Raises
    ------
    ConfigurationError
        If no converter is registered under that name.
    """
    converter_class = ConverterRegistry.get(str(tool))
    return converter_class(settings, **options)


def available_tools() -> list[str]:
    return ConverterRegistry.names()


def convert(
    tool: Tool | str,
    raw: bytes | str,
    *,
    settings: Settings | None = None,
    **options: Any,
) -> SarifLog:
    """Convert one tool's raw output into a SARIF log with a single run.

    Raises
    ------
    ParseError
        If *raw* is not valid output of *tool*. No partial log is returned.
    """
    return get_converter(tool, settings=settings, **options).convert(raw)


def convert_file(
    tool: Tool | str,
    path: str | Path,
    *,
    settings: Settings | None = None,
    **options: Any,
) -> SarifLog:
    """Read *path* and convert its contents."""
    raw = Path(path).read_bytes()
    logger.debug("Read %d bytes from %s", len(raw), path)
    return convert(tool, raw, settings=settings, **options)


def convert_clippy(raw: bytes | str, **options: Any) -> SarifLog:
    return ClippyConverter(options.pop("settings", None), **options).convert(raw)


def convert_hadolint(raw: bytes | str, **options: Any) -> SarifLog:
    return HadolintConverter(options.pop("settings", None), **options).convert(raw)


def convert_shellcheck(raw: bytes | str, **options: Any) -> SarifLog:
    return ShellCheckConverter(options.pop("settings", None), **options).convert(raw)


def convert_clang_tidy(raw: bytes | str, **options: Any) -> SarifLog:
    return ClangTidyConverter(options.pop("settings", None), **options).convert(raw)
