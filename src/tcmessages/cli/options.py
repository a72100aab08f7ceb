# topmark:header:start
#
#   project      : tcmessages
#   file         : options.py
#   file_relpath : src/tcmessages/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable group options (verbosity, flow id) and
their resolution logic, so commands can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from tcmessages.cli.errors import TcMessagesUsageError
from tcmessages.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the diagnostic logging level from ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level, or None when neither flag was given (the
        environment then decides).

    Raises:
        TcMessagesUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level.
    """
    # They are mutually exclusive
    if verbose_count > 0 and quiet_count > 0:
        raise TcMessagesUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase diagnostic logging on stderr. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical diagnostics.",
    )(f)
    return f


def flow_id_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --flow-id option to a command."""
    return click.option(
        "--flow-id",
        "flow_id",
        type=str,
        default=None,
        help="Flow id attached to every message (default: $TCMESSAGES_FLOW_ID).",
    )(f)
