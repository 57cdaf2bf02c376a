"""Shared fixtures for the minigrep test suite."""

from __future__ import annotations

import pytest

from minigrep.config import CASE_INSENSITIVE_ENV_VARS, LOG_ENV


@pytest.fixture(autouse=True)
def _case_sensitive_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without the case-insensitivity or logging variables."""
    for name in (*CASE_INSENSITIVE_ENV_VARS, LOG_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def poem() -> str:
    return "Rust:\nsafe, fast, productive.\nPick three."
