"""Shared fixtures for all test suites."""
from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from modelpath.constants.tool_constants import STORE_ROOT_ENV
from modelpath.core.config import reset_config, set_store_root

HEX64 = "0123456789abcdef" * 4


@pytest.fixture(autouse=True)
def _isolate_env_and_store(monkeypatch, tmp_path) -> Iterator[None]:
    """Keep logs and the model store inside tmp_path for every test."""
    for key in list(os.environ.keys()):
        if key.startswith("MODELPATH_LOG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv(STORE_ROOT_ENV, raising=False)
    monkeypatch.setenv("MODELPATH_LOG_STDERR", "0")
    monkeypatch.setenv("MODELPATH_LOG_FILE", str(tmp_path / "logs" / "modelpath.log"))

    set_store_root(tmp_path / "models")
    yield
    reset_config()


@pytest.fixture
def store_root(tmp_path) -> Path:
    return (tmp_path / "models").resolve()


@pytest.fixture
def hex64() -> str:
    return HEX64
