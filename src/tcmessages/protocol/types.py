# topmark:header:start
#
#   project      : tcmessages
#   file         : types.py
#   file_relpath : src/tcmessages/protocol/types.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Closed value sets used by TeamCity service messages.

Each enum's ``.value`` is the exact token written on the wire. Logger methods
accept either a member or its token string (see `KeyedStrEnum.coerce`).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TypeAlias

from tcmessages.core.enum_mixins import KeyedStrEnum

# A parameter entry: ``(key, value)`` or a bare positional value.
# A ``None`` key marks a bare value inside the tuple form.
ParameterEntry: TypeAlias = "tuple[str | None, str] | str"
Parameters: TypeAlias = "Mapping[str, str] | Iterable[ParameterEntry]"

# Logger-side entries may still carry ``None`` values (dropped before formatting).
OptionalParameter: TypeAlias = "tuple[str | None, str | None]"
OptionalParameters: TypeAlias = "Sequence[OptionalParameter]"


class MessageStatus(KeyedStrEnum):
    """Status of a build log ``message``."""

    NORMAL = ("NORMAL", "Normal message", ("info",))
    WARNING = ("WARNING", "Warning", ("warn",))
    FAILURE = ("FAILURE", "Failure")
    ERROR = ("ERROR", "Error (may fail the build)")


class BuildStatus(KeyedStrEnum):
    """Value of the ``status`` attribute of ``buildStatus``.

    TeamCity only recognizes ``SUCCESS``; omit the status to keep the
    server-computed one and change just the text.
    """

    SUCCESS = ("SUCCESS", "Mark the build successful")


class ImportType(KeyedStrEnum):
    """Report formats understood by ``importData``."""

    # Test reports
    JUNIT = ("junit", "JUnit XML report")
    SUREFIRE = ("surefire", "Maven Surefire XML report")
    NUNIT = ("nunit", "NUnit XML report")
    MSTEST = ("mstest", "MSTest TRX report")
    VSTEST = ("vstest", "VSTest TRX report")
    GTEST = ("gtest", "Google Test XML report")
    # Code inspections
    JSLINT = ("jslint", "JSLint XML report")
    CHECKSTYLE = ("checkstyle", "Checkstyle XML report")
    FINDBUGS = ("findBugs", "FindBugs XML report")
    PMD = ("pmd", "PMD XML report")
    FXCOP = ("FxCop", "FxCop XML report")
    RESHARPER_INSPECT_CODE = ("ReSharperInspectCode", "ReSharper InspectCode XML report")
    # Duplicates
    PMD_CPD = ("pmdCpd", "PMD Copy/Paste Detector XML report")
    DUP_FINDER = ("DupFinder", "ReSharper dupFinder XML report")
    # Coverage
    DOTNET_COVERAGE = ("dotNetCoverage", ".NET coverage report (requires tool)")
    JACOCO = ("jacoco", "JaCoCo coverage data")


class WhenNoDataPublished(KeyedStrEnum):
    """What ``importData`` reports when the file contains no data."""

    INFO = ("info", "Log an informational message")
    NOTHING = ("nothing", "Stay silent")
    WARNING = ("warning", "Log a warning", ("warn",))
    ERROR = ("error", "Fail the build")
