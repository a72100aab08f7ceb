# topmark:header:start
#
#   project      : tcmessages
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Tests for `tcmessages.config.logging`."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest

from tcmessages.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    TcMessagesLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from tcmessages.logger import MessageLogger
from tcmessages.writers import BufferWriter
from tests.conftest import parametrize


@pytest.fixture
def restore_trace_logging() -> Iterator[None]:
    """Put the suite-wide TRACE configuration back after the test."""
    yield
    setup_logging(level=TRACE_LEVEL)


@parametrize(
    "raw,level",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" info ", logging.INFO),
        ("warn", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("10", 10),
        ("", None),
        (None, None),
        ("loud", None),
    ],
)
def test_parse_log_level(raw: str | None, level: int | None) -> None:
    assert parse_log_level(raw) == level


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv("TCMESSAGES_LOG_LEVEL", "DEBUG")
    assert resolve_env_log_level() == logging.DEBUG


@pytest.mark.usefixtures("restore_trace_logging")
def test_setup_logging_defaults_to_critical_on_stderr() -> None:
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert isinstance(handler.formatter, ChalkFormatter)


@pytest.mark.usefixtures("restore_trace_logging")
def test_setup_logging_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TCMESSAGES_LOG_LEVEL", "info")
    setup_logging()
    assert logging.getLogger().level == logging.INFO


@pytest.mark.usefixtures("restore_trace_logging")
def test_setup_logging_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TCMESSAGES_LOG_LEVEL", "info")
    setup_logging(level=logging.ERROR)
    assert logging.getLogger().level == logging.ERROR


def test_get_logger_supports_trace() -> None:
    log: TcMessagesLogger = get_logger("tcmessages.tests")
    assert isinstance(log, TcMessagesLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_formatter_emits_trace_records(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(TRACE_LEVEL, logger="tcmessages.protocol.formatter"):
        MessageLogger(BufferWriter()).message("hi")
    assert any(
        r.levelno == TRACE_LEVEL and "formatted message" in r.getMessage() for r in caplog.records
    )


def test_derive_emits_debug_record(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="tcmessages.logger"):
        MessageLogger(BufferWriter(), "a").derive("b")
    assert any("deriving logger" in r.getMessage() for r in caplog.records)


def test_logging_does_not_alter_output(caplog: pytest.LogCaptureFixture) -> None:
    quiet = BufferWriter()
    loud = BufferWriter()
    MessageLogger(quiet).test_failed("t", "m")
    with caplog.at_level(TRACE_LEVEL):
        MessageLogger(loud).test_failed("t", "m")
    assert [line.split("'", 2)[2] for line in quiet.lines()] == [
        line.split("'", 2)[2] for line in loud.lines()
    ]
