# topmark:header:start
#
#   project      : tcmessages
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Pytest configuration for the tcmessages test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and offers small helpers for comparing service message lines.

Notes:
    Every message written by `tcmessages.logger.MessageLogger` carries a
    ``timestamp`` attribute with the current time. Use `strip_timestamp`
    (or the ``buffer``/``message_logger`` fixtures) to compare lines exactly.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Final, TypeVar, cast

import pytest

from tcmessages.config import logging
from tcmessages.logger import MessageLogger
from tcmessages.writers import BufferWriter

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

TIMESTAMP_RE: Final[re.Pattern[str]] = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}[+-]\d{4}"
)

_TIMESTAMP_ATTR_RE: Final[re.Pattern[str]] = re.compile(r" timestamp='[^']*'")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def strip_timestamp(line: str) -> str:
    """Remove the ``timestamp='...'`` attribute from a service message line.

    Args:
        line (str): One formatted line (with or without its terminator).

    Returns:
        str: The line without its timestamp attribute.
    """
    return _TIMESTAMP_ATTR_RE.sub("", line, count=1)


def extract_timestamp(line: str) -> str:
    """Return the raw value of the ``timestamp`` attribute of ``line``."""
    match = re.search(r" timestamp='([^']*)'", line)
    assert match is not None, line
    return match.group(1)


def buffered_lines(buffer: BufferWriter) -> list[str]:
    """Return the lines collected by ``buffer`` with timestamps removed."""
    return [strip_timestamp(line) for line in buffer.lines()]


@pytest.fixture(autouse=True)
def silence_tcmessages_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level and flow id are not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("TCMESSAGES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TCMESSAGES_FLOW_ID", raising=False)
    monkeypatch.delenv("TEAMCITY_VERSION", raising=False)


@pytest.fixture
def buffer() -> BufferWriter:
    """Return an empty in-memory writer."""
    return BufferWriter()


@pytest.fixture
def message_logger(buffer: BufferWriter) -> MessageLogger:
    """Return a logger without flow id writing to the ``buffer`` fixture."""
    return MessageLogger(buffer)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
