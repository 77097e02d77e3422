# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration module for sarifconv.

Provides exit codes derived from the most severe converted result.
"""

from sarifconv.ci.exit_codes import CIExitCode, level_to_exit_code, log_to_exit_code, worst_level

__all__ = [
    "CIExitCode",
    "level_to_exit_code",
    "log_to_exit_code",
    "worst_level",
]
