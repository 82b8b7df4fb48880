# topmark:header:start
#
#   project      : StatusKit
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Tests for the internal logging helpers (TRACE level, env resolution, formatter)."""

from __future__ import annotations

import logging
from io import StringIO

import pytest

from statuskit.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    StatuskitLogger,
    get_logger,
    level_from_name,
    resolve_env_log_level,
    setup_logging,
)
from statuskit.constants import ENV_LOG_LEVEL
from tests.conftest import parametrize


@parametrize(
    "token, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("warn", logging.WARNING),
        ("15", 15),
        ("", None),
        (None, None),
        ("chatty", None),
    ],
)
def test_level_from_name(token: str | None, expected: int | None) -> None:
    assert level_from_name(token) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv(ENV_LOG_LEVEL, "DEBUG")
    assert resolve_env_log_level() == logging.DEBUG


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    log = get_logger("statuskit.tests.trace")
    assert isinstance(log, StatuskitLogger)

    with caplog.at_level(TRACE_LEVEL, logger="statuskit.tests.trace"):
        log.trace("fine-grained %d", 7)

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "fine-grained 7")]


def test_chalk_formatter_keeps_the_message() -> None:
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "went %s", ("wrong",), None)

    assert "[ERROR] went wrong" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)


def test_setup_logging_writes_to_given_stream() -> None:
    stream = StringIO()
    try:
        setup_logging(logging.INFO, stream=stream)
        get_logger("statuskit.tests.setup").info("hello")
        get_logger("statuskit.tests.setup").debug("hidden")
    finally:
        setup_logging(level=TRACE_LEVEL)

    assert "hello" in stream.getvalue()
    assert "hidden" not in stream.getvalue()
