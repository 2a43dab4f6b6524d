"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROLLOUT_ENV_NAMES = (
    "ROLLOUT_ENV",
    "ROLLOUT_MANIFEST_ROOT",
    "ROLLOUT_KUBECTL",
    "ROLLOUT_LOG_LEVEL",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_rollout_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from rollout variables set in the calling shell."""
    for name in _ROLLOUT_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> None:
    """Restore default logging configuration before every test."""
    from core.logging_config import configure_logging

    configure_logging()
