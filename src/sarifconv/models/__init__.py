# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF data model for sarifconv."""

from sarifconv.models.sarif import (
    SarifArtifactChange,
    SarifArtifactContent,
    SarifArtifactLocation,
    SarifDriver,
    SarifFix,
    SarifLocation,
    SarifLog,
    SarifMessage,
    SarifPhysicalLocation,
    SarifRegion,
    SarifReplacement,
    SarifResult,
    SarifRule,
    SarifRuleConfig,
    SarifRun,
    SarifTool,
)

__all__ = [
    "SarifArtifactChange",
    "SarifArtifactContent",
    "SarifArtifactLocation",
    "SarifDriver",
    "SarifFix",
    "SarifLocation",
    "SarifLog",
    "SarifMessage",
    "SarifPhysicalLocation",
    "SarifRegion",
    "SarifReplacement",
    "SarifResult",
    "SarifRule",
    "SarifRuleConfig",
    "SarifRun",
    "SarifTool",
]
