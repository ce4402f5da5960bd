# tests/cli/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _wide_console(monkeypatch) -> Iterator[None]:
    """Keep rich tables from wrapping long store paths."""
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setenv("NO_COLOR", "1")
    yield
