# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

from sarifconv.core.config import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "native"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any .env file or SARIFCONV_* variables."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SARIFCONV_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """CLI invocations install a handler bound to the runner's stderr; drop it afterwards."""
    yield
    import logging

    logger = logging.getLogger("sarifconv")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clippy_output() -> bytes:
    return (FIXTURES_DIR / "clippy.jsonl").read_bytes()


@pytest.fixture
def hadolint_output() -> bytes:
    return (FIXTURES_DIR / "hadolint.json").read_bytes()


@pytest.fixture
def shellcheck_output() -> bytes:
    return (FIXTURES_DIR / "shellcheck.json").read_bytes()


@pytest.fixture
def shellcheck_json1_output() -> bytes:
    return (FIXTURES_DIR / "shellcheck_json1.json").read_bytes()


@pytest.fixture
def clang_tidy_output() -> bytes:
    return (FIXTURES_DIR / "clang_tidy.txt").read_bytes()
