# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-tool converters; importing this package registers all of them."""

from sarifconv.converters.base import BaseConverter
from sarifconv.converters.clang_tidy import ClangTidyConverter
from sarifconv.converters.clippy import ClippyConverter
from sarifconv.converters.hadolint import HadolintConverter
from sarifconv.converters.registry import ConverterRegistry, converter
from sarifconv.converters.shellcheck import ShellCheckConverter

__all__ = [
    "BaseConverter",
    "ClangTidyConverter",
    "ClippyConverter",
    "ConverterRegistry",
    "HadolintConverter",
    "ShellCheckConverter",
    "converter",
]
