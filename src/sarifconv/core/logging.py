# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging for conversions."""

import json
import logging
import sys
from typing import Any

from sarifconv.core.exceptions import ConfigurationError

# Record attributes promoted into JSON output when passed via ``extra=``.
CONTEXT_FIELDS = ("tool", "uri", "line", "rule_id")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_entry[field] = value
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        tool = getattr(record, "tool", None)
        if tool:
            msg = f"{msg} [tool={tool}]"
        return msg


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    root = logging.getLogger("sarifconv")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    elif fmt == "text":
        handler.setFormatter(
            TextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    else:
        raise ConfigurationError(f"Unknown log format: {fmt!r}")
    root.addHandler(handler)
