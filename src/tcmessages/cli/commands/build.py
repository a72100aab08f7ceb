# topmark:header:start
#
#   project      : tcmessages
#   file         : build.py
#   file_relpath : src/tcmessages/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Build control commands: problems, status, number, parameters, statistics and reports."""

from __future__ import annotations

from decimal import Decimal

import click

from tcmessages.cli.cli_types import EnumChoiceParam, NumberParam
from tcmessages.cli.cmd_common import run_logger_call
from tcmessages.protocol.types import BuildStatus, ImportType, WhenNoDataPublished


@click.command(name="build-problem", help="Report a build problem (fails the build).")
@click.argument("description")
@click.option("--identity", default=None, help="Stable problem id (an identifier).")
def build_problem_command(description: str, identity: str | None) -> None:
    """Report DESCRIPTION as a build problem."""
    run_logger_call(lambda log: log.build_problem(description, identity))


@click.command(name="build-status", help="Change the build status and/or its text.")
@click.option("--status", type=EnumChoiceParam(BuildStatus), default=None, help="New status.")
@click.option("--text", default=None, help="New status text.")
def build_status_command(status: BuildStatus | None, text: str | None) -> None:
    """Change the build status; at least one of --status and --text is required."""
    run_logger_call(lambda log: log.build_status(status, text))


@click.command(name="build-number", help="Set the build number.")
@click.argument("value")
def build_number_command(value: str) -> None:
    """Set the build number to VALUE."""
    run_logger_call(lambda log: log.build_number(value))


@click.command(name="set-parameter", help="Add or change a build parameter.")
@click.argument("name")
@click.argument("value")
def set_parameter_command(name: str, value: str) -> None:
    """Set build parameter NAME to VALUE."""
    run_logger_call(lambda log: log.set_parameter(name, value))


@click.command(name="statistic", help="Report a custom build statistic value.")
@click.argument("key")
@click.argument("value", type=NumberParam())
def statistic_command(key: str, value: int | Decimal) -> None:
    """Report statistic KEY with numeric VALUE."""
    run_logger_call(lambda log: log.build_statistic_value(key, value))


@click.command(name="import-data", help="Import an external report file.")
@click.argument("report_type", metavar="TYPE", type=EnumChoiceParam(ImportType))
@click.argument("path")
@click.option("--tool", default=None, help="Coverage tool (for dotNetCoverage).")
@click.option("--find-bugs-home", default=None, help="FindBugs home (for findBugs).")
@click.option(
    "--parse-out-of-date/--no-parse-out-of-date",
    default=None,
    help="Also parse report files older than the build start.",
)
@click.option(
    "--when-no-data-published",
    type=EnumChoiceParam(WhenNoDataPublished),
    default=None,
    help="What to report when no data is found.",
)
@click.option("--verbose/--no-verbose", "verbose", default=None, help="Log every processed file.")
def import_data_command(
    report_type: ImportType,
    path: str,
    tool: str | None,
    find_bugs_home: str | None,
    parse_out_of_date: bool | None,
    when_no_data_published: WhenNoDataPublished | None,
    verbose: bool | None,
) -> None:
    """Import the TYPE report(s) found at PATH."""
    run_logger_call(
        lambda log: log.import_data(
            report_type,
            path,
            tool=tool,
            find_bugs_home=find_bugs_home,
            parse_out_of_date=parse_out_of_date,
            when_no_data_published=when_no_data_published,
            verbose=verbose,
        )
    )


@click.command(
    name="disable-service-messages",
    help="Stop TeamCity from interpreting later output as service messages.",
)
def disable_service_messages_command() -> None:
    """Disable service message processing."""
    run_logger_call(lambda log: log.disable_service_messages())


@click.command(
    name="enable-service-messages",
    help="Resume service message processing.",
)
def enable_service_messages_command() -> None:
    """Enable service message processing."""
    run_logger_call(lambda log: log.enable_service_messages())


BUILD_COMMANDS: tuple[click.Command, ...] = (
    build_problem_command,
    build_status_command,
    build_number_command,
    set_parameter_command,
    statistic_command,
    import_data_command,
    disable_service_messages_command,
    enable_service_messages_command,
)
