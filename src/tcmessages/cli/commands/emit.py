# topmark:header:start
#
#   project      : tcmessages
#   file         : emit.py
#   file_relpath : src/tcmessages/cli/commands/emit.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""tcmessages `emit` command.

Writes an arbitrary service message straight through the formatter, without
``timestamp`` or ``flowId``. Useful for messages the typed commands do not
cover.
"""

from __future__ import annotations

import click

from tcmessages.cli.cmd_common import run_logger_call
from tcmessages.protocol.formatter import format_message, is_valid_identifier


def parse_parameter(token: str) -> tuple[str | None, str]:
    """Split ``key=value`` into a keyed entry; anything else is a bare value.

    A token is keyed only when the text before the first ``=`` is an
    identifier, so bare values may still contain ``=``.
    """
    key, sep, value = token.partition("=")
    if sep and is_valid_identifier(key):
        return key, value
    return None, token


@click.command(
    name="emit",
    help="Emit a raw service message: NAME followed by key=value or bare values.",
)
@click.argument("name")
@click.argument("parameters", nargs=-1)
def emit_command(name: str, parameters: tuple[str, ...]) -> None:
    """Format NAME and PARAMETERS as-is and write the line."""
    entries: list[tuple[str | None, str]] = [parse_parameter(p) for p in parameters]
    run_logger_call(lambda log: log.writer.write(format_message(name, entries)))
