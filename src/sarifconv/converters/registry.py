# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Converter registration and lookup."""

from __future__ import annotations

from typing import TypeVar

from sarifconv.converters.base import BaseConverter
from sarifconv.core.exceptions import ConfigurationError

T = TypeVar("T", bound=BaseConverter)


class ConverterRegistry:
    """Central registry of converters, keyed by tool name."""

    _converters: dict[str, type[BaseConverter]] = {}

    @classmethod
    def register(cls, converter_class: type[T]) -> type[T]:
        cls._converters[str(converter_class.tool)] = converter_class
        return converter_class

    @classmethod
    def get(cls, tool: str) -> type[BaseConverter]:
        try:
            return cls._converters[str(tool)]
        except KeyError:
            known = ", ".join(sorted(cls._converters)) or "none"
            raise ConfigurationError(f"No converter for tool {tool!r} (available: {known})") from None

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._converters)

    @classmethod
    def get_all(cls) -> list[type[BaseConverter]]:
        return list(cls._converters.values())


def converter(cls: type[T]) -> type[T]:
    """Decorator to register a converter class."""
    return ConverterRegistry.register(cls)
