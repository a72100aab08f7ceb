# topmark:header:start
#
#   project      : tcmessages
#   file         : cmd_common.py
#   file_relpath : src/tcmessages/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Common command utilities for Click-based commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tcmessages.cli.errors import translate_errors
from tcmessages.config.env import resolve_env_flow_id
from tcmessages.logger import MessageLogger
from tcmessages.writers import StdoutWriter

if TYPE_CHECKING:
    from collections.abc import Callable


def get_message_logger(ctx: click.Context | None = None) -> MessageLogger:
    """Return the logger stored on the Click context by the group callback.

    Falls back to a stdout logger (flow id from the environment) when no
    context object is available, e.g. when a command is invoked standalone.
    """
    ctx = ctx or click.get_current_context()
    obj = ctx.find_object(dict)
    if obj is not None and isinstance(obj.get("message_logger"), MessageLogger):
        return obj["message_logger"]
    return MessageLogger(StdoutWriter(), resolve_env_flow_id())


def run_logger_call(call: Callable[[MessageLogger], None]) -> None:
    """Run ``call`` with the context's logger, mapping errors onto CLI exit codes."""
    message_logger: MessageLogger = get_message_logger()
    with translate_errors():
        call(message_logger)
