# topmark:header:start
#
#   project      : tcmessages
#   file         : test_logger_scopes.py
#   file_relpath : tests/test_logger_scopes.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Tests for the scoped helpers of `MessageLogger` and their context managers.

Every helper must write its closing message on every exit path and hand the
body's result (or exception) back to the caller unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING

import pytest

from tcmessages.core.errors import InvalidArgumentError
from tests.conftest import buffered_lines, parametrize

if TYPE_CHECKING:
    from tcmessages.logger import MessageLogger
    from tcmessages.writers import BufferWriter

RunHelper = Callable[["MessageLogger", Callable[["MessageLogger"], object]], object]
EnterScope = Callable[["MessageLogger"], AbstractContextManager["MessageLogger"]]

SCOPED_HELPERS: list[tuple[str, RunHelper, list[str]]] = [
    (
        "block",
        lambda log, body: log.block("Foo", "desc", body),
        [
            "##teamcity[blockOpened name='Foo' description='desc']",
            "##teamcity[blockClosed name='Foo']",
        ],
    ),
    (
        "compilation",
        lambda log, body: log.compilation("javac", body),
        [
            "##teamcity[compilationStarted compilerName='javac']",
            "##teamcity[compilationFinished compilerName='javac']",
        ],
    ),
    (
        "progress",
        lambda log, body: log.progress("step", body),
        [
            "##teamcity[progressStart message='step']",
            "##teamcity[progressFinish message='step']",
        ],
    ),
    (
        "without_service_messages",
        lambda log, body: log.without_service_messages(body),
        [
            "##teamcity[disableServiceMessages]",
            "##teamcity[enableServiceMessages]",
        ],
    ),
]

CONTEXT_MANAGERS: list[tuple[str, EnterScope, list[str]]] = [
    (
        "opened_block",
        lambda log: log.opened_block("Foo"),
        [
            "##teamcity[blockOpened name='Foo']",
            "##teamcity[blockClosed name='Foo']",
        ],
    ),
    (
        "compilation_scope",
        lambda log: log.compilation_scope("javac"),
        [
            "##teamcity[compilationStarted compilerName='javac']",
            "##teamcity[compilationFinished compilerName='javac']",
        ],
    ),
    (
        "progress_scope",
        lambda log: log.progress_scope("step"),
        [
            "##teamcity[progressStart message='step']",
            "##teamcity[progressFinish message='step']",
        ],
    ),
    (
        "service_messages_disabled",
        lambda log: log.service_messages_disabled(),
        [
            "##teamcity[disableServiceMessages]",
            "##teamcity[enableServiceMessages]",
        ],
    ),
]


HELPER_CASES = [(run, expected) for _, run, expected in SCOPED_HELPERS]
HELPER_IDS = [name for name, _, _ in SCOPED_HELPERS]
SCOPE_CASES = [(enter, expected) for _, enter, expected in CONTEXT_MANAGERS]
SCOPE_IDS = [name for name, _, _ in CONTEXT_MANAGERS]


class BodyFailedError(Exception):
    """Raised from test bodies."""


@parametrize("run,expected", HELPER_CASES, ids=HELPER_IDS)
def test_helper_returns_body_result(
    message_logger: MessageLogger,
    buffer: BufferWriter,
    run: RunHelper,
    expected: list[str],
) -> None:
    seen: list[MessageLogger] = []

    def body(log: MessageLogger) -> int:
        seen.append(log)
        return 42

    assert run(message_logger, body) == 42
    assert seen == [message_logger]
    assert buffered_lines(buffer) == expected


@parametrize("run,expected", HELPER_CASES, ids=HELPER_IDS)
def test_helper_closes_and_reraises_same_exception(
    message_logger: MessageLogger,
    buffer: BufferWriter,
    run: RunHelper,
    expected: list[str],
) -> None:
    failure = BodyFailedError("boom")

    def body(log: MessageLogger) -> object:
        raise failure

    with pytest.raises(BodyFailedError) as excinfo:
        run(message_logger, body)
    assert excinfo.value is failure
    assert buffered_lines(buffer) == expected


def test_body_messages_sit_between_start_and_finish(
    message_logger: MessageLogger, buffer: BufferWriter
) -> None:
    def body(log: MessageLogger) -> None:
        log.message("inside")

    message_logger.block("Foo", None, body)
    assert buffered_lines(buffer) == [
        "##teamcity[blockOpened name='Foo']",
        "##teamcity[message text='inside' status='NORMAL']",
        "##teamcity[blockClosed name='Foo']",
    ]


def test_nested_blocks_close_innermost_first(
    message_logger: MessageLogger, buffer: BufferWriter
) -> None:
    with pytest.raises(BodyFailedError):
        with message_logger.opened_block("outer"), message_logger.opened_block("inner"):
            raise BodyFailedError
    assert buffered_lines(buffer) == [
        "##teamcity[blockOpened name='outer']",
        "##teamcity[blockOpened name='inner']",
        "##teamcity[blockClosed name='inner']",
        "##teamcity[blockClosed name='outer']",
    ]


@parametrize("enter,expected", SCOPE_CASES, ids=SCOPE_IDS)
def test_context_manager_yields_logger(
    message_logger: MessageLogger,
    buffer: BufferWriter,
    enter: EnterScope,
    expected: list[str],
) -> None:
    with enter(message_logger) as log:
        assert log is message_logger
        assert len(buffer.lines()) == 1
    assert buffered_lines(buffer) == expected


@parametrize("enter,expected", SCOPE_CASES, ids=SCOPE_IDS)
def test_context_manager_closes_on_exception(
    message_logger: MessageLogger,
    buffer: BufferWriter,
    enter: EnterScope,
    expected: list[str],
) -> None:
    failure = KeyboardInterrupt()
    with pytest.raises(KeyboardInterrupt) as excinfo:
        with enter(message_logger):
            raise failure
    assert excinfo.value is failure
    assert buffered_lines(buffer) == expected


def test_failing_start_skips_body_and_finish(
    message_logger: MessageLogger, buffer: BufferWriter
) -> None:
    """A start message that cannot be formatted fails before the body runs."""
    calls: list[str] = []
    with pytest.raises(InvalidArgumentError):
        message_logger.block(123, None, lambda log: calls.append("body"))  # type: ignore[arg-type]
    assert calls == []
    assert buffer.getvalue() == ""
