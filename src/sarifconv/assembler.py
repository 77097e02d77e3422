# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Assemble converter output into a single SARIF run."""

from __future__ import annotations

from collections.abc import Iterable

from sarifconv.core.exceptions import SchemaError
from sarifconv.models.sarif import SarifDriver, SarifResult, SarifRule, SarifRun, SarifTool


class RuleCatalog:
    """Rules keyed by id, iterated in first-seen order.

    The first rule registered for an id keeps its descriptive metadata;
    later registrations of the same id are ignored.
    """

    def __init__(self) -> None:
        self._rules: dict[str, SarifRule] = {}

    def add(self, rule: SarifRule) -> None:
        if rule.id not in self._rules:
            self._rules[rule.id] = rule

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def rules(self) -> list[SarifRule]:
        return list(self._rules.values())

    def indices(self) -> dict[str, int]:
        return {rule_id: i for i, rule_id in enumerate(self._rules)}


class RunAssembler:
    """Collect results and rules for one tool and build the run.

    Results keep the order in which they were added; nothing is sorted.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        version: str | None = None,
        information_uri: str | None = None,
    ) -> None:
        self.tool_name = tool_name
        self.version = version
        self.information_uri = information_uri
        self.catalog = RuleCatalog()
        self._results: list[SarifResult] = []

    def add(self, result: SarifResult, rule: SarifRule | None = None) -> None:
        if rule is not None:
            self.catalog.add(rule)
        self._results.append(result)

    def add_rule(self, rule: SarifRule) -> None:
        self.catalog.add(rule)

    def __len__(self) -> int:
        return len(self._results)

    def build(self) -> SarifRun:
        """Return the finished run with ``ruleIndex`` filled in.

        Raises
        ------
        SchemaError
            If a result references a rule that was never added.
        """
        indices = self.catalog.indices()
        results: list[SarifResult] = []
        for position, result in enumerate(self._results):
            index = indices.get(result.ruleId)
            if index is None:
                raise SchemaError(
                    f"Result #{position} references unknown rule {result.ruleId!r}"
                )
            results.append(result.model_copy(update={"ruleIndex": index}))

        driver = SarifDriver(
            name=self.tool_name,
            version=self.version,
            informationUri=self.information_uri,
            rules=self.catalog.rules(),
        )
        return SarifRun(tool=SarifTool(driver=driver), results=results)


def assemble_run(
    tool_name: str,
    contributions: Iterable[tuple[SarifResult, SarifRule]],
    *,
    version: str | None = None,
    information_uri: str | None = None,
) -> SarifRun:
    """Build a run from ordered ``(result, rule)`` pairs."""
    assembler = RunAssembler(tool_name, version=version, information_uri=information_uri)
    for result, rule in contributions:
        assembler.add(result, rule)
    return assembler.build()
