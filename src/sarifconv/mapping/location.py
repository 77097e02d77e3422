# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Native positional fields mapped to SARIF locations and regions."""

from __future__ import annotations

from sarifconv.core.exceptions import LocationError
from sarifconv.models.sarif import (
    SarifArtifactLocation,
    SarifLocation,
    SarifMessage,
    SarifPhysicalLocation,
    SarifRegion,
)


def normalize_uri(path: str) -> str:
    """Use forward slashes regardless of the platform that produced *path*."""
    return path.replace("\\", "/")


def _coerce_position(value: object, name: str, *, zero_based: bool) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise LocationError(f"{name} is not a number: {value!r}")
    try:
        position = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise LocationError(f"{name} is not a number: {value!r}") from exc
    if position < 0:
        raise LocationError(f"{name} is negative: {position}")
    if zero_based:
        position += 1
    if position < 1:
        raise LocationError(f"{name} must be 1-based, got {position}")
    return position


def make_region(
    start_line: object,
    start_column: object = None,
    end_line: object = None,
    end_column: object = None,
    *,
    zero_based: bool = False,
) -> SarifRegion:
    """Build a 1-based SARIF region.

    Parameters
    ----------
    start_line, start_column, end_line, end_column:
        Raw positions as the tool reported them. Only ``start_line`` is
        required.
    zero_based:
        Set when the tool counts lines and columns from zero.

    A missing end collapses the region to a single point, so start and end
    are identical.

    Raises
    ------
    LocationError
        If a position is missing, negative, non-numeric, or the end lies
        before the start.
    """
    line = _coerce_position(start_line, "start line", zero_based=zero_based)
    if line is None:
        raise LocationError("start line is missing")
    column = _coerce_position(start_column, "start column", zero_based=zero_based)
    last_line = _coerce_position(end_line, "end line", zero_based=zero_based)
    last_column = _coerce_position(end_column, "end column", zero_based=zero_based)

    if last_line is None:
        last_line = line
        if last_column is None:
            last_column = column

    if last_line < line:
        raise LocationError(f"end line {last_line} is before start line {line}")
    if (
        last_line == line
        and column is not None
        and last_column is not None
        and last_column < column
    ):
        raise LocationError(f"end column {last_column} is before start column {column}")

    return SarifRegion(
        startLine=line,
        startColumn=column,
        endLine=last_line,
        endColumn=last_column,
    )


def offset_to_position(text: str, offset: int) -> tuple[int, int]:
    """Resolve a UTF-8 byte offset to a 1-based ``(line, column)`` pair.

    Columns count characters, not bytes.
    """
    data = text.encode("utf-8")
    if offset < 0 or offset > len(data):
        raise LocationError(f"byte offset {offset} is outside the artifact ({len(data)} bytes)")
    prefix = data[:offset]
    line = prefix.count(b"\n") + 1
    line_start = prefix.rfind(b"\n") + 1
    column = len(prefix[line_start:].decode("utf-8", errors="replace")) + 1
    return line, column


def region_from_offsets(text: str, start: int, end: int | None = None) -> SarifRegion:
    """Build a region from byte offsets into the artifact's text."""
    if end is not None and end < start:
        raise LocationError(f"end offset {end} is before start offset {start}")
    start_line, start_column = offset_to_position(text, start)
    if end is None:
        return make_region(start_line, start_column)
    end_line, end_column = offset_to_position(text, end)
    return make_region(start_line, start_column, end_line, end_column)


def make_location(
    uri: str,
    region: SarifRegion | None = None,
    message: str | None = None,
) -> SarifLocation:
    return SarifLocation(
        physicalLocation=SarifPhysicalLocation(
            artifactLocation=SarifArtifactLocation(uri=normalize_uri(uri)),
            region=region,
        ),
        message=SarifMessage(text=message) if message else None,
    )
