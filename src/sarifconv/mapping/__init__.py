# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Severity and location mapping shared by all converters."""

from sarifconv.mapping.location import (
    make_location,
    make_region,
    normalize_uri,
    offset_to_position,
    region_from_offsets,
)
from sarifconv.mapping.severity import map_level

__all__ = [
    "make_location",
    "make_region",
    "map_level",
    "normalize_uri",
    "offset_to_position",
    "region_from_offsets",
]
