"""Unit tests for structured logging configuration."""

from __future__ import annotations

import contextlib
import io
import json

import pytest

from core.logging_config import configure_logging, get_logger


def test_get_logger_writes_json_events_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Events should be JSON on stderr with level and timestamp, never on stdout."""
    configure_logging("info")

    get_logger("tests.logging").info("manifest_applied", manifest="configmap", step=1)
    captured = capsys.readouterr()
    payload = json.loads(captured.err)

    assert (
        captured.out == ""
        and payload["event"] == "manifest_applied"
        and payload["manifest"] == "configmap"
        and payload["step"] == 1
        and payload["level"] == "info"
        and "timestamp" in payload
    )


def test_configure_logging_level_filters_lower_events(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("error")
    logger = get_logger("tests.logging")

    logger.info("hidden_event")
    logger.error("visible_event")
    lines = capsys.readouterr().err.strip().splitlines()

    assert [json.loads(line)["event"] for line in lines] == ["visible_event"]


def test_logging_follows_stderr_after_configured_stream_is_closed(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Logging should target the current stderr, not the one seen at configure time."""
    buffer = io.StringIO()
    with contextlib.redirect_stderr(buffer):
        configure_logging("info")
    buffer.close()

    get_logger("tests.logging").info("after_redirect")

    assert json.loads(capsys.readouterr().err)["event"] == "after_redirect"
