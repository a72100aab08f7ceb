# topmark:header:start
#
#   project      : tcmessages
#   file         : reporting.py
#   file_relpath : src/tcmessages/cli/commands/reporting.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Test reporting commands."""

from __future__ import annotations

import click

from tcmessages.cli.cli_types import SecondsParam
from tcmessages.cli.cmd_common import run_logger_call


@click.command(name="test-suite-started", help="Report the start of a test suite.")
@click.argument("name")
def report_test_suite_started_command(name: str) -> None:
    """Start suite NAME."""
    run_logger_call(lambda log: log.test_suite_started(name))


@click.command(name="test-suite-finished", help="Report the end of a test suite.")
@click.argument("name")
def report_test_suite_finished_command(name: str) -> None:
    """Finish suite NAME."""
    run_logger_call(lambda log: log.test_suite_finished(name))


@click.command(name="test-started", help="Report the start of a test.")
@click.argument("name")
@click.option(
    "--capture-standard-output",
    is_flag=True,
    default=False,
    help="Attribute all output until test-finished to this test.",
)
def report_test_started_command(name: str, capture_standard_output: bool) -> None:
    """Start test NAME."""
    run_logger_call(lambda log: log.test_started(name, capture_standard_output))


@click.command(name="test-finished", help="Report the end of a test.")
@click.argument("name")
@click.option("--duration", type=SecondsParam(), default=None, help="Duration in seconds.")
def report_test_finished_command(name: str, duration: float | None) -> None:
    """Finish test NAME."""
    run_logger_call(lambda log: log.test_finished(name, duration))


@click.command(name="test-failed", help="Report a test failure.")
@click.argument("name")
@click.argument("message")
@click.option("--details", default=None, help="Failure details, e.g. a stack trace.")
@click.option("--expected", default=None, help="Expected value (comparison failure).")
@click.option("--actual", default=None, help="Actual value (comparison failure).")
def report_test_failed_command(
    name: str,
    message: str,
    details: str | None,
    expected: str | None,
    actual: str | None,
) -> None:
    """Report that test NAME failed with MESSAGE.

    Passing both --expected and --actual reports a comparison failure.
    """
    if (expected is None) != (actual is None):
        raise click.UsageError("'--expected' and '--actual' must be given together.")
    if expected is not None and actual is not None:
        run_logger_call(
            lambda log: log.test_failed_with_comparison(name, message, details, actual, expected)
        )
    else:
        run_logger_call(lambda log: log.test_failed(name, message, details))


@click.command(name="test-ignored", help="Report an ignored test.")
@click.argument("name")
@click.argument("message")
@click.option("--details", default=None, help="Additional details.")
def report_test_ignored_command(name: str, message: str, details: str | None) -> None:
    """Report that test NAME was ignored because of MESSAGE."""
    run_logger_call(lambda log: log.test_ignored(name, message, details))


@click.command(name="test-stdout", help="Attach standard output to a test.")
@click.argument("name")
@click.argument("text")
def report_test_std_out_command(name: str, text: str) -> None:
    """Attach TEXT as standard output of test NAME."""
    run_logger_call(lambda log: log.test_std_out(name, text))


@click.command(name="test-stderr", help="Attach standard error output to a test.")
@click.argument("name")
@click.argument("text")
def report_test_std_err_command(name: str, text: str) -> None:
    """Attach TEXT as standard error output of test NAME."""
    run_logger_call(lambda log: log.test_std_err(name, text))


REPORTING_COMMANDS: tuple[click.Command, ...] = (
    report_test_suite_started_command,
    report_test_suite_finished_command,
    report_test_started_command,
    report_test_finished_command,
    report_test_failed_command,
    report_test_ignored_command,
    report_test_std_out_command,
    report_test_std_err_command,
)
