# topmark:header:start
#
#   project      : tcmessages
#   file         : main.py
#   file_relpath : src/tcmessages/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""tcmessages CLI entry point.

Key ideas:
- Group-level options are resolved once and placed into ``ctx.obj``.
- The group builds one `MessageLogger` writing to stdout; subcommands fetch it
  via `tcmessages.cli.cmd_common.get_message_logger`.
- Diagnostics go to stderr, service messages to stdout.
"""

from __future__ import annotations

import click

from tcmessages.cli.commands.build import BUILD_COMMANDS
from tcmessages.cli.commands.emit import emit_command
from tcmessages.cli.commands.messages import MESSAGE_COMMANDS
from tcmessages.cli.commands.reporting import REPORTING_COMMANDS
from tcmessages.cli.commands.version import version_command
from tcmessages.cli.options import common_verbose_options, flow_id_option, resolve_verbosity
from tcmessages.config.env import is_running_under_teamcity, resolve_env_flow_id
from tcmessages.config.logging import get_logger, setup_logging
from tcmessages.logger import MessageLogger
from tcmessages.writers import StdoutWriter

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    flow_id: str | None,
) -> None:
    """Initialize shared state (logging, message logger) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        flow_id (str | None): Flow id from ``--flow-id``; falls back to the
            environment when ``None``.
    """
    ctx.ensure_object(dict)

    # Flags win over TCMESSAGES_LOG_LEVEL; setup_logging reads the env on None.
    level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_flow_id: str | None = flow_id if flow_id is not None else resolve_env_flow_id()
    ctx.obj["message_logger"] = MessageLogger(StdoutWriter(), effective_flow_id)
    logger.debug(
        "flow id: %r, running under TeamCity: %s",
        effective_flow_id,
        is_running_under_teamcity(),
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Emit TeamCity service messages from build scripts.",
)
@common_verbose_options
@flow_id_option
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    flow_id: str | None,
) -> None:
    """Entry point for the tcmessages CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, flow_id=flow_id)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(emit_command)

for _command in (*MESSAGE_COMMANDS, *REPORTING_COMMANDS, *BUILD_COMMANDS):
    cli.add_command(_command)

if __name__ == "__main__":
    cli()
