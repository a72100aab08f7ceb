# topmark:header:start
#
#   project      : tcmessages
#   file         : logger.py
#   file_relpath : src/tcmessages/logger.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Typed facade over the service message protocol.

[`MessageLogger`][tcmessages.logger.MessageLogger] offers one method per build
event kind. Every method:

1. builds the message-specific parameters,
2. prefixes ``timestamp`` and, when the logger has one, ``flowId``,
3. drops parameters whose value is ``None`` (``""`` is kept),
4. formats the line with [`format_message`][tcmessages.protocol.formatter.format_message],
5. writes it to the writer exactly once.

Validation errors are raised before anything is written. Errors raised by the
writer propagate unchanged.

Scoped helpers (``block``, ``compilation``, ``progress``,
``without_service_messages``) and their context-manager twins emit their
closing message on every exit path, then re-raise whatever the body raised.

Thread safety:
    Loggers are frozen dataclasses, but nothing serializes writes. When several
    threads share a logger (or a writer), callers must serialize externally
    if they need whole lines to stay in order.
"""

from __future__ import annotations

import math
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, replace
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, TypeVar

from tcmessages.config.logging import get_logger
from tcmessages.constants import TICKS_PER_SECOND
from tcmessages.core.errors import InvalidArgumentError
from tcmessages.protocol.formatter import (
    ensure_valid_identifier,
    format_message,
    format_timestamp,
)
from tcmessages.protocol.types import (
    BuildStatus,
    ImportType,
    MessageStatus,
    WhenNoDataPublished,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from tcmessages.config.logging import TcMessagesLogger
    from tcmessages.protocol.types import OptionalParameter, OptionalParameters
    from tcmessages.writers.base import Writer

logger: TcMessagesLogger = get_logger(__name__)

T = TypeVar("T")


def _format_bool(value: bool | None) -> str | None:
    if value is None:
        return None
    return "true" if value else "false"


def _format_number(value: int | float | Decimal) -> str:
    """Render a statistic value as plain decimal text (never in exponent form)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidArgumentError(
            f"Statistic value must be a number, got {type(value).__name__}"
        )
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Statistic value must be finite, got {value!r}")
        # repr() is the shortest round-tripping form; Decimal drops the exponent.
        return format(Decimal(repr(value)), "f")
    if not value.is_finite():
        raise InvalidArgumentError(f"Statistic value must be finite, got {value!r}")
    return format(value, "f")


def _duration_ticks(duration: int | float | timedelta | None) -> str | None:
    """Convert seconds (or a timedelta) to a count of 100-nanosecond ticks."""
    if duration is None:
        return None
    if isinstance(duration, timedelta):
        return str(round(duration.total_seconds() * TICKS_PER_SECOND))
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise InvalidArgumentError(
            f"Duration must be seconds or a timedelta, got {type(duration).__name__}"
        )
    if not math.isfinite(duration):
        raise InvalidArgumentError(f"Duration must be finite, got {duration!r}")
    return str(round(duration * TICKS_PER_SECOND))


@dataclass(frozen=True, slots=True)
class MessageLogger:
    """Writes TeamCity service messages through a writer.

    Instances are frozen: the writer and flow id are fixed at construction,
    and copies share the writer.
    [`derive`][tcmessages.logger.MessageLogger.derive] creates a sibling
    logger with another flow id that shares the same writer.

    Attributes:
        writer (Writer): The writer used to write messages. It is shared, not
            owned: several derived loggers may use it.
        flow_id (str | None): The flow id attached to every message, or
            ``None`` for no flow.
    """

    writer: Writer
    flow_id: str | None = None

    def derive(self, flow_id: str | None = None) -> MessageLogger:
        """Return a new logger using the same writer but another flow id.

        Args:
            flow_id (str | None): The flow id of the new logger, or ``None``.

        Returns:
            MessageLogger: The new instance.
        """
        logger.debug("deriving logger: flow %r -> %r", self.flow_id, flow_id)
        return replace(self, flow_id=flow_id)

    # --- Plumbing -------------------------------------------------------------

    @contextmanager
    def _scope(
        self,
        label: str,
        start: Callable[[], None],
        finish: Callable[[], None],
    ) -> Iterator[MessageLogger]:
        """Write the start message, yield, and always write the finish message."""
        start()
        try:
            yield self
        except BaseException as exc:
            logger.debug("%s: closing after %s", label, type(exc).__name__)
            raise
        finally:
            finish()

    def _write(self, message_name: str, parameters: OptionalParameters = ()) -> None:
        """Format and write one message.

        ``timestamp`` and ``flowId`` are prepended; every parameter whose value
        is ``None`` is dropped. Empty strings are kept.
        """
        full: list[OptionalParameter] = [
            ("timestamp", format_timestamp()),
            ("flowId", self.flow_id),
            *parameters,
        ]
        final: list[tuple[str | None, str]] = [
            (key, value) for key, value in full if value is not None
        ]
        text: str = format_message(message_name, final)
        self.writer.write(text)

    def _log_message(
        self,
        text: str,
        status: MessageStatus,
        error_details: str | None = None,
    ) -> None:
        self._write(
            "message",
            [
                ("text", text),
                ("status", status.value),
                ("errorDetails", error_details),
            ],
        )

    # --- Build log messages ---------------------------------------------------

    def message(self, text: str) -> None:
        """Write a normal build log message."""
        self._log_message(text, MessageStatus.NORMAL)

    def warning(self, text: str) -> None:
        """Write a warning build log message."""
        self._log_message(text, MessageStatus.WARNING)

    def failure(self, text: str) -> None:
        """Write a failure build log message."""
        self._log_message(text, MessageStatus.FAILURE)

    def error(self, text: str, error_details: str | None = None) -> None:
        """Write an error build log message.

        This message fails the build when the build configuration enables
        "Fail build if an error message is logged by build runner".

        Args:
            text (str): The message.
            error_details (str | None): Error details such as a stack trace.
        """
        self._log_message(text, MessageStatus.ERROR, error_details)

    # --- Blocks ---------------------------------------------------------------

    def block_opened(self, name: str, description: str | None = "") -> None:
        """Open a block grouping several messages in the build log.

        Args:
            name (str): The block name.
            description (str | None): The block description; omitted when empty.
        """
        self._write(
            "blockOpened",
            [
                ("name", name),
                ("description", description or None),
            ],
        )

    def block_closed(self, name: str) -> None:
        """Close a block. TeamCity closes any inner blocks still open."""
        self._write("blockClosed", [("name", name)])

    def opened_block(
        self, name: str, description: str | None = ""
    ) -> AbstractContextManager[MessageLogger]:
        """Context manager emitting ``blockOpened`` on entry and ``blockClosed`` on exit."""
        return self._scope(
            f"block {name!r}",
            lambda: self.block_opened(name, description),
            lambda: self.block_closed(name),
        )

    def block(
        self,
        name: str,
        description: str | None,
        body: Callable[[MessageLogger], T],
    ) -> T:
        """Call ``body`` inside an opened block and return its result.

        ``blockClosed`` is written even when ``body`` raises; the exception is
        re-raised afterwards.

        Args:
            name (str): The block name.
            description (str | None): The block description; omitted when empty.
            body (Callable[[MessageLogger], T]): Called with this logger.

        Returns:
            T: Whatever ``body`` returns.
        """
        with self.opened_block(name, description):
            return body(self)

    # --- Compilation ----------------------------------------------------------

    def compilation_started(self, compiler_name: str) -> None:
        """Mark the start of a compilation.

        Any ``ERROR`` message written before ``compilation_finished`` is
        reported by TeamCity as a compilation error.
        """
        self._write("compilationStarted", [("compilerName", compiler_name)])

    def compilation_finished(self, compiler_name: str) -> None:
        """Mark the end of a compilation."""
        self._write("compilationFinished", [("compilerName", compiler_name)])

    def compilation_scope(self, compiler_name: str) -> AbstractContextManager[MessageLogger]:
        """Context manager wrapping its body in compilation start/finish messages."""
        return self._scope(
            f"compilation {compiler_name!r}",
            lambda: self.compilation_started(compiler_name),
            lambda: self.compilation_finished(compiler_name),
        )

    def compilation(self, compiler_name: str, body: Callable[[MessageLogger], T]) -> T:
        """Call ``body`` between compilation start and finish messages.

        Returns:
            T: Whatever ``body`` returns.
        """
        with self.compilation_scope(compiler_name):
            return body(self)

    # --- Tests ----------------------------------------------------------------

    def test_suite_started(self, name: str) -> None:
        """Report the start of a test suite."""
        self._write("testSuiteStarted", [("name", name)])

    def test_suite_finished(self, name: str) -> None:
        """Report the end of a test suite."""
        self._write("testSuiteFinished", [("name", name)])

    def test_started(self, name: str, capture_standard_output: bool = False) -> None:
        """Report the start of a test.

        Args:
            name (str): The test name.
            capture_standard_output (bool): If True, TeamCity attributes all
                output between start and finish to this test.
        """
        self._write(
            "testStarted",
            [
                ("name", name),
                ("captureStandardOutput", "true" if capture_standard_output else None),
            ],
        )

    def test_finished(self, name: str, duration: int | float | timedelta | None = None) -> None:
        """Report the end of a test.

        Args:
            name (str): The test name.
            duration (int | float | timedelta | None): Test duration in seconds
                (or a timedelta). Written as a rounded count of 100 ns ticks.
        """
        self._write(
            "testFinished",
            [
                ("name", name),
                ("duration", _duration_ticks(duration)),
            ],
        )

    def test_failed(self, name: str, message: str, details: str | None = None) -> None:
        """Report a test failure. Write at most one per test."""
        self._write(
            "testFailed",
            [
                ("name", name),
                ("message", message),
                ("details", details),
            ],
        )

    def test_failed_with_comparison(
        self,
        name: str,
        message: str,
        details: str | None,
        actual: str,
        expected: str,
    ) -> None:
        """Report a test failure caused by comparing two values.

        TeamCity shows a diff between ``expected`` and ``actual``.
        """
        self._write(
            "testFailed",
            [
                ("name", name),
                ("message", message),
                ("details", details),
                ("type", "comparisonFailure"),
                ("expected", expected),
                ("actual", actual),
            ],
        )

    def test_ignored(self, name: str, message: str, details: str | None = None) -> None:
        """Report an ignored test. May be written without test start/finish."""
        self._write(
            "testIgnored",
            [
                ("name", name),
                ("message", message),
                ("details", details),
            ],
        )

    def test_std_out(self, name: str, text: str) -> None:
        """Attach standard output to a test."""
        self._write("testStdOut", [("name", name), ("out", text)])

    def test_std_err(self, name: str, text: str) -> None:
        """Attach standard error output to a test."""
        self._write("testStdErr", [("name", name), ("out", text)])

    # --- Artifacts and progress -----------------------------------------------

    def publish_artifacts(self, path: str) -> None:
        """Publish artifacts while the build is still running.

        Args:
            path (str): Artifact path specification, in the same syntax as the
                build configuration's "Artifact paths" setting.
        """
        self._write("publishArtifacts", [("path", path)])

    def progress_message(self, message: str) -> None:
        """Show a progress message until the next one (or the next target) replaces it."""
        self._write("progressMessage", [("message", message)])

    def progress_start(self, message: str) -> None:
        """Start a progress block."""
        self._write("progressStart", [("message", message)])

    def progress_finish(self, message: str) -> None:
        """Finish a progress block."""
        self._write("progressFinish", [("message", message)])

    def progress_scope(self, message: str) -> AbstractContextManager[MessageLogger]:
        """Context manager wrapping its body in progress start/finish messages."""
        return self._scope(
            f"progress {message!r}",
            lambda: self.progress_start(message),
            lambda: self.progress_finish(message),
        )

    def progress(self, message: str, body: Callable[[MessageLogger], T]) -> T:
        """Call ``body`` between progress start and finish messages.

        Returns:
            T: Whatever ``body`` returns.
        """
        with self.progress_scope(message):
            return body(self)

    # --- Build problems, status, number and parameters ------------------------

    def build_problem(self, description: str, identity: str | None = None) -> None:
        """Report a build problem, failing the build.

        Args:
            description (str): Human-readable description of the problem.
            identity (str | None): Stable id; problems with equal identities
                are treated as the same problem across builds.

        Raises:
            InvalidIdentifierError: If ``identity`` is given but not an identifier.
        """
        if identity is not None:
            ensure_valid_identifier(identity)
        self._write(
            "buildProblem",
            [
                ("description", description),
                ("identity", identity),
            ],
        )

    def build_status(
        self,
        status: BuildStatus | str | None = None,
        text: str | None = None,
    ) -> None:
        """Change the build status and/or its text.

        Args:
            status (BuildStatus | str | None): New status; only ``SUCCESS`` is
                meaningful to TeamCity.
            text (str | None): New status text. ``{build.status.text}`` is
                replaced by TeamCity with the current text.

        Raises:
            InvalidArgumentError: If both arguments are ``None`` or the status
                is unknown.
        """
        if status is None and text is None:
            raise InvalidArgumentError("build_status() needs a status, a text, or both")
        self._write(
            "buildStatus",
            [
                ("status", None if status is None else BuildStatus.coerce(status).value),
                ("text", text),
            ],
        )

    def build_number(self, value: str) -> None:
        """Set the build number. Written as a single bare value."""
        self._write("buildNumber", [(None, value)])

    def set_parameter(self, name: str, value: str) -> None:
        """Add or change a build parameter for the remaining build steps."""
        self._write("setParameter", [("name", name), ("value", value)])

    def build_statistic_value(self, key: str, value: int | float | Decimal) -> None:
        """Report a custom build statistic.

        Args:
            key (str): Statistic key.
            value (int | float | Decimal): Finite numeric value, written as
                plain decimal text.

        Raises:
            InvalidArgumentError: If ``value`` is not a finite number.
        """
        self._write(
            "buildStatisticValue",
            [("key", key), ("value", _format_number(value))],
        )

    # --- Service message processing -------------------------------------------

    def disable_service_messages(self) -> None:
        """Ask TeamCity to stop interpreting subsequent output as service messages."""
        self._write("disableServiceMessages")

    def enable_service_messages(self) -> None:
        """Ask TeamCity to interpret service messages again."""
        self._write("enableServiceMessages")

    def service_messages_disabled(self) -> AbstractContextManager[MessageLogger]:
        """Context manager disabling service message processing for its body."""
        return self._scope(
            "disabled service messages",
            self.disable_service_messages,
            self.enable_service_messages,
        )

    def without_service_messages(self, body: Callable[[MessageLogger], T]) -> T:
        """Call ``body`` with service message processing disabled.

        Returns:
            T: Whatever ``body`` returns.
        """
        with self.service_messages_disabled():
            return body(self)

    # --- Importing reports ----------------------------------------------------

    def import_data(
        self,
        type: ImportType | str,  # noqa: A002 - protocol attribute name
        path: str,
        *,
        tool: str | None = None,
        find_bugs_home: str | None = None,
        parse_out_of_date: bool | None = None,
        when_no_data_published: WhenNoDataPublished | str | None = None,
        verbose: bool | None = None,
    ) -> None:
        """Ask TeamCity to import an external report file.

        Args:
            type (ImportType | str): Report format.
            path (str): Path (or Ant-like wildcard) of the report file(s).
            tool (str | None): Coverage tool, required for ``dotNetCoverage``.
            find_bugs_home (str | None): FindBugs home, for ``findBugs``.
            parse_out_of_date (bool | None): Also parse files older than the build start.
            when_no_data_published (WhenNoDataPublished | str | None): What to
                report when no data is found.
            verbose (bool | None): Log every processed file.

        Raises:
            InvalidArgumentError: If ``type`` or ``when_no_data_published`` is unknown.
        """
        import_type: ImportType = ImportType.coerce(type)
        no_data: WhenNoDataPublished | None = (
            None
            if when_no_data_published is None
            else WhenNoDataPublished.coerce(when_no_data_published)
        )
        self._write(
            "importData",
            [
                ("type", import_type.value),
                ("path", path),
                ("tool", tool),
                ("findBugsHome", find_bugs_home),
                ("parseOutOfDate", _format_bool(parse_out_of_date)),
                ("whenNoDataPublished", None if no_data is None else no_data.value),
                ("verbose", _format_bool(verbose)),
            ],
        )
