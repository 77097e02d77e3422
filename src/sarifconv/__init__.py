# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sarifconv - convert linter diagnostics into SARIF 2.1.0."""

__version__ = "0.1.0"

from sarifconv.core.exceptions import (
    ConversionError,
    LocationError,
    ParseError,
    SarifConvError,
    SchemaError,
)
from sarifconv.sdk import (
    available_tools,
    convert,
    convert_clang_tidy,
    convert_clippy,
    convert_file,
    convert_hadolint,
    convert_shellcheck,
    get_converter,
)
from sarifconv.serialization import from_json, merge_logs, to_json

__all__ = [
    "ConversionError",
    "LocationError",
    "ParseError",
    "SarifConvError",
    "SchemaError",
    "__version__",
    "available_tools",
    "convert",
    "convert_clang_tidy",
    "convert_clippy",
    "convert_file",
    "convert_hadolint",
    "convert_shellcheck",
    "from_json",
    "get_converter",
    "merge_logs",
    "to_json",
]
