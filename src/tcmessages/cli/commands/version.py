# topmark:header:start
#
#   project      : tcmessages
#   file         : version.py
#   file_relpath : src/tcmessages/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""tcmessages `version` command.

Prints the tcmessages version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from tcmessages.cli.cli_types import EnumChoiceParam
from tcmessages.constants import TCMESSAGES_VERSION
from tcmessages.core.enum_mixins import KeyedStrEnum


class OutputFormat(KeyedStrEnum):
    """Output formats for informational commands."""

    TEXT = ("text", "Plain text", ("default", "plain"))
    JSON = ("json", "JSON object")


@click.command(
    name="version",
    help="Show the current version of tcmessages.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of tcmessages.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt is OutputFormat.JSON:
        click.echo(json.dumps({"version": TCMESSAGES_VERSION}))
    else:
        click.echo(TCMESSAGES_VERSION)
