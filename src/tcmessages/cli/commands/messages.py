# topmark:header:start
#
#   project      : tcmessages
#   file         : messages.py
#   file_relpath : src/tcmessages/cli/commands/messages.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Build log commands: messages, blocks, compilation, progress and artifacts."""

from __future__ import annotations

import click

from tcmessages.cli.cli_types import EnumChoiceParam
from tcmessages.cli.cmd_common import run_logger_call
from tcmessages.cli.errors import TcMessagesUsageError
from tcmessages.protocol.types import MessageStatus


@click.command(name="message", help="Write a build log message.")
@click.argument("text")
@click.option(
    "--status",
    type=EnumChoiceParam(MessageStatus),
    default=MessageStatus.NORMAL.value,
    show_default=True,
    help="Message status.",
)
@click.option("--details", default=None, help="Error details (only with --status error).")
def message_command(text: str, status: MessageStatus, details: str | None) -> None:
    """Write TEXT with the given status."""
    if details is not None and status is not MessageStatus.ERROR:
        raise TcMessagesUsageError("'--details' is only valid with '--status error'.")

    if status is MessageStatus.ERROR:
        run_logger_call(lambda log: log.error(text, details))
    elif status is MessageStatus.WARNING:
        run_logger_call(lambda log: log.warning(text))
    elif status is MessageStatus.FAILURE:
        run_logger_call(lambda log: log.failure(text))
    else:
        run_logger_call(lambda log: log.message(text))


@click.command(name="block-opened", help="Open a named block in the build log.")
@click.argument("name")
@click.option("--description", default="", help="Block description.")
def block_opened_command(name: str, description: str) -> None:
    """Open block NAME."""
    run_logger_call(lambda log: log.block_opened(name, description))


@click.command(name="block-closed", help="Close a named block in the build log.")
@click.argument("name")
def block_closed_command(name: str) -> None:
    """Close block NAME."""
    run_logger_call(lambda log: log.block_closed(name))


@click.command(name="compilation-started", help="Mark the start of a compilation.")
@click.argument("compiler_name")
def compilation_started_command(compiler_name: str) -> None:
    """Start compilation COMPILER_NAME."""
    run_logger_call(lambda log: log.compilation_started(compiler_name))


@click.command(name="compilation-finished", help="Mark the end of a compilation.")
@click.argument("compiler_name")
def compilation_finished_command(compiler_name: str) -> None:
    """Finish compilation COMPILER_NAME."""
    run_logger_call(lambda log: log.compilation_finished(compiler_name))


@click.command(name="progress-message", help="Show a build progress message.")
@click.argument("message")
def progress_message_command(message: str) -> None:
    """Write progress MESSAGE."""
    run_logger_call(lambda log: log.progress_message(message))


@click.command(name="progress-start", help="Start a progress block.")
@click.argument("message")
def progress_start_command(message: str) -> None:
    """Start progress MESSAGE."""
    run_logger_call(lambda log: log.progress_start(message))


@click.command(name="progress-finish", help="Finish a progress block.")
@click.argument("message")
def progress_finish_command(message: str) -> None:
    """Finish progress MESSAGE."""
    run_logger_call(lambda log: log.progress_finish(message))


@click.command(name="publish-artifacts", help="Publish artifacts while the build runs.")
@click.argument("path")
def publish_artifacts_command(path: str) -> None:
    """Publish artifacts matching PATH."""
    run_logger_call(lambda log: log.publish_artifacts(path))


MESSAGE_COMMANDS: tuple[click.Command, ...] = (
    message_command,
    block_opened_command,
    block_closed_command,
    compilation_started_command,
    compilation_finished_command,
    progress_message_command,
    progress_start_command,
    progress_finish_command,
    publish_artifacts_command,
)
