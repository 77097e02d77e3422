# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 models.

Field names follow the SARIF JSON schema (camelCase) so that a model dump
is the wire document. Unknown properties are kept, which lets logs produced
by other tools pass through ``from_json``/``to_json`` unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sarifconv.core.constants import DEFAULT_LEVEL, SARIF_SCHEMA_URI, SARIF_VERSION, SarifLevel


class _SarifModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class SarifMessage(_SarifModel):
    text: str


class SarifArtifactLocation(_SarifModel):
    uri: str


class SarifArtifactContent(_SarifModel):
    text: str


class SarifRegion(_SarifModel):
    startLine: int = Field(ge=1)
    startColumn: int | None = Field(default=None, ge=1)
    endLine: int | None = Field(default=None, ge=1)
    endColumn: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _end_not_before_start(self) -> SarifRegion:
        if self.endLine is not None and self.endLine < self.startLine:
            raise ValueError(
                f"endLine {self.endLine} is before startLine {self.startLine}"
            )
        same_line = self.endLine is None or self.endLine == self.startLine
        if (
            same_line
            and self.startColumn is not None
            and self.endColumn is not None
            and self.endColumn < self.startColumn
        ):
            raise ValueError(
                f"endColumn {self.endColumn} is before startColumn {self.startColumn}"
            )
        return self


class SarifPhysicalLocation(_SarifModel):
    artifactLocation: SarifArtifactLocation
    region: SarifRegion | None = None


class SarifLocation(_SarifModel):
    physicalLocation: SarifPhysicalLocation
    message: SarifMessage | None = None


class SarifReplacement(_SarifModel):
    deletedRegion: SarifRegion
    insertedContent: SarifArtifactContent | None = None


class SarifArtifactChange(_SarifModel):
    artifactLocation: SarifArtifactLocation
    replacements: list[SarifReplacement] = Field(default_factory=list)


class SarifFix(_SarifModel):
    description: SarifMessage | None = None
    artifactChanges: list[SarifArtifactChange] = Field(default_factory=list)


class SarifRuleConfig(_SarifModel):
    level: SarifLevel = DEFAULT_LEVEL


class SarifRule(_SarifModel):
    """A ReportingDescriptor: one entry of the driver's rule catalog."""

    id: str = Field(min_length=1)
    name: str | None = None
    shortDescription: SarifMessage | None = None
    fullDescription: SarifMessage | None = None
    helpUri: str | None = None
    defaultConfiguration: SarifRuleConfig | None = None


class SarifDriver(_SarifModel):
    name: str
    version: str | None = None
    informationUri: str | None = None
    rules: list[SarifRule] = Field(default_factory=list)


class SarifTool(_SarifModel):
    driver: SarifDriver


class SarifResult(_SarifModel):
    ruleId: str = Field(min_length=1)
    ruleIndex: int | None = Field(default=None, ge=0)
    level: SarifLevel = DEFAULT_LEVEL
    message: SarifMessage
    locations: list[SarifLocation] = Field(default_factory=list)
    relatedLocations: list[SarifLocation] | None = None
    fixes: list[SarifFix] | None = None
    properties: dict[str, Any] | None = None


class SarifRun(_SarifModel):
    tool: SarifTool
    results: list[SarifResult] = Field(default_factory=list)


class SarifLog(_SarifModel):
    schema_uri: str = Field(default=SARIF_SCHEMA_URI, alias="$schema")
    version: str = SARIF_VERSION
    runs: list[SarifRun] = Field(default_factory=list)
