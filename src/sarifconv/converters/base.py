# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract base class for tool converters."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from sarifconv.assembler import RunAssembler
from sarifconv.core.config import Settings, get_settings
from sarifconv.core.constants import TOOL_INFORMATION_URIS, Tool
from sarifconv.core.exceptions import LocationError, ParseError
from sarifconv.mapping.location import make_location, make_region
from sarifconv.models.sarif import SarifLocation, SarifLog, SarifResult, SarifRule, SarifRun
from sarifconv.serialization import make_log

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def decode_input(raw: bytes | str) -> str:
    """Decode raw tool output as UTF-8, tolerating a byte order mark."""
    if isinstance(raw, str):
        return raw.removeprefix("\ufeff")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(
            "Tool output is not valid UTF-8",
            offset=exc.start,
            excerpt=repr(raw[exc.start:exc.start + 16]),
        ) from exc


def load_json(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid {what} JSON: {exc.msg}",
            line=exc.lineno,
            offset=exc.pos,
            excerpt=text[exc.pos:],
        ) from exc


def validate_record(model: type[M], data: object, *, what: str, line: int | None = None, index: int | None = None) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        where = f" #{index}" if index is not None else ""
        raise ParseError(
            f"Malformed {what}{where}: {exc.errors()[0]['msg']}",
            line=line,
            excerpt=json.dumps(data, default=str),
        ) from exc


class BaseConverter(ABC):
    """All tool converters inherit from this class.

    A converter holds only configuration; everything produced while
    converting lives in locals of :meth:`convert_run`, so one instance can
    be shared between threads.
    """

    tool: Tool

    def __init__(self, settings: Settings | None = None, *, version: str | None = None) -> None:
        self.settings = settings or get_settings()
        self.version = version

    @property
    def information_uri(self) -> str:
        return TOOL_INFORMATION_URIS[self.tool]

    def convert(self, raw: bytes | str) -> SarifLog:
        """Convert one complete tool output document into a SARIF log."""
        return make_log([self.convert_run(raw)], schema_uri=self.settings.schema_uri)

    def convert_run(self, raw: bytes | str) -> SarifRun:
        text = decode_input(raw)
        assembler = RunAssembler(
            str(self.tool),
            version=self.version,
            information_uri=self.information_uri,
        )
        dropped = 0
        for result, rule in self.iter_results(text):
            if not result.locations and not self.settings.keep_unlocated_results:
                dropped += 1
                continue
            assembler.add(result, rule)

        run = assembler.build()
        logger.info(
            "Converted %d result(s) covering %d rule(s)",
            len(run.results),
            len(run.tool.driver.rules),
            extra={"tool": str(self.tool)},
        )
        if dropped:
            logger.info(
                "Dropped %d result(s) without a location", dropped, extra={"tool": str(self.tool)}
            )
        return run

    @abstractmethod
    def iter_results(self, text: str) -> Iterator[tuple[SarifResult, SarifRule]]:
        """Yield ``(result, rule)`` pairs in the order the tool reported them.

        Must raise :class:`ParseError` when *text* is not valid output of
        the tool.
        """
        ...

    def location(
        self,
        uri: str | None,
        start_line: object,
        start_column: object = None,
        end_line: object = None,
        end_column: object = None,
        *,
        message: str | None = None,
    ) -> SarifLocation | None:
        """Build a location, or ``None`` when the positions are unusable.

        A malformed position only costs this one location; the caller keeps
        the result.
        """
        if not uri:
            return None
        try:
            region = make_region(start_line, start_column, end_line, end_column)
        except LocationError as exc:
            self.log_dropped_location(uri, exc)
            return None
        return make_location(uri, region, message)

    def log_dropped_location(self, uri: str, exc: LocationError) -> None:
        logger.warning(
            "Dropping malformed location in %s: %s",
            uri,
            exc,
            extra={"tool": str(self.tool), "uri": uri},
        )
