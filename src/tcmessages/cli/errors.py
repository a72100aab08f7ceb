# topmark:header:start
#
#   project      : tcmessages
#   file         : errors.py
#   file_relpath : src/tcmessages/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Exceptions for the tcmessages CLI.

Usage:
    Commands run their logger calls inside `translate_errors()`, which turns
    library errors into these Click exceptions with standardized exit codes.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from tcmessages.cli.exit_codes import ExitCode
from tcmessages.config.logging import get_logger
from tcmessages.core.errors import (
    InvalidArgumentError,
    InvalidIdentifierError,
    TcMessagesError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tcmessages.config.logging import TcMessagesLogger

logger: TcMessagesLogger = get_logger(__name__)


class TcMessagesCliError(click.ClickException):
    """Base class for all tcmessages CLI errors."""

    exit_code = ExitCode.FAILURE


class TcMessagesUsageError(TcMessagesCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TcMessagesDataError(TcMessagesCliError):
    """Error for invalid identifiers or arguments (nothing was written)."""

    exit_code = ExitCode.DATA_ERROR


class TcMessagesIOError(TcMessagesCliError):
    """Error for failures while writing the message."""

    exit_code = ExitCode.IO_ERROR


class TcMessagesUnexpectedError(TcMessagesCliError):
    """Error for unhandled/unknown library errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


@contextmanager
def translate_errors() -> Iterator[None]:
    """Map library and I/O errors raised in the block onto CLI errors.

    Raises:
        TcMessagesDataError: On `InvalidIdentifierError` / `InvalidArgumentError`.
        TcMessagesIOError: On `OSError` from the writer.
        TcMessagesUnexpectedError: On any other `TcMessagesError`.
    """
    try:
        yield
    except (InvalidIdentifierError, InvalidArgumentError) as exc:
        logger.debug("rejected: %s", exc)
        raise TcMessagesDataError(str(exc)) from exc
    except OSError as exc:
        logger.debug("write failed: %s", exc)
        raise TcMessagesIOError(f"Cannot write message: {exc}") from exc
    except TcMessagesError as exc:
        logger.debug("unexpected library error: %r", exc)
        raise TcMessagesUnexpectedError(str(exc)) from exc
