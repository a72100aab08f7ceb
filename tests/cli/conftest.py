# topmark:header:start
#
#   project      : tcmessages
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""CLI test helpers for running tcmessages through Click's test runner.

Service messages go to stdout and diagnostics to stderr, so assertions on
message text use ``result.stdout``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from tcmessages.cli.exit_codes import ExitCode
from tcmessages.cli.main import cli
from tcmessages.config.logging import TRACE_LEVEL, setup_logging
from tests.conftest import strip_timestamp

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence


@pytest.fixture(autouse=True)
def restore_logging_after_cli() -> Iterator[None]:
    """The CLI reconfigures the root logger; put the suite's TRACE setup back."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["message", "hi"]``.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["build-number", "1.0"])
        assert_SUCCESS(result)
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, env=env)


def stdout_lines(result: Result) -> list[str]:
    """Return stdout split into lines with timestamps removed."""
    return [strip_timestamp(line) for line in result.stdout.splitlines()]


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_CLICK_USAGE(result: Result) -> None:
    """Assert that Click itself rejected the arguments (code 2)."""
    assert result.exit_code == 2, result.output
