# topmark:header:start
#
#   project      : tcmessages
#   file         : formatter.py
#   file_relpath : src/tcmessages/protocol/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""TeamCity service message formatter.

Turns a message name plus an ordered list of parameters into one line of wire
text::

    ##teamcity[<name> <key>='<escaped value>' '<escaped bare value>' ...]

Both the message name and every parameter key must be identifiers (an ASCII
letter followed by at least one ASCII letter, digit or ``-``). Values are
escaped with TeamCity's ``|`` escape character.

This module does no filtering: parameters reaching `format_message` are final.
Dropping ``None``-valued optional parameters is done by
[`tcmessages.logger.MessageLogger`][].

See Also:
    https://www.jetbrains.com/help/teamcity/service-messages.html
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Final, cast

from tcmessages.config.logging import get_logger
from tcmessages.constants import (
    LINE_TERMINATOR,
    SERVICE_MESSAGE_PREFIX,
    SERVICE_MESSAGE_SUFFIX,
    TIMESTAMP_FORMAT,
)
from tcmessages.core.errors import InvalidArgumentError, InvalidIdentifierError

if TYPE_CHECKING:
    from tcmessages.config.logging import TcMessagesLogger
    from tcmessages.protocol.types import ParameterEntry, Parameters

logger: TcMessagesLogger = get_logger(__name__)

IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][-A-Za-z0-9]+")

ESCAPE_CHARACTER_MAP: Final[Mapping[str, str]] = {
    "'": "|'",
    "\n": "|n",
    "\r": "|r",
    "|": "||",
    "[": "|[",
    "]": "|]",
}

# Either one special character, or a literal ``\uNNNN`` sequence in the text.
_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"(['\n\r|\[\]])|\\u([0-9]{4})")


def is_valid_identifier(value: object) -> bool:
    """Return True if ``value`` is usable as a message name or parameter key."""
    return isinstance(value, str) and IDENTIFIER_RE.fullmatch(value) is not None


def ensure_valid_identifier(value: object) -> str:
    """Return ``value`` unchanged if it is a valid identifier.

    Args:
        value (object): Candidate message name, parameter key or problem identity.

    Returns:
        str: The validated identifier.

    Raises:
        InvalidIdentifierError: If ``value`` is not a string matching
            ``^[A-Za-z][-A-Za-z0-9]+$``.
    """
    if not is_valid_identifier(value):
        raise InvalidIdentifierError(value)
    return cast("str", value)


def _escape_match(match: re.Match[str]) -> str:
    char: str | None = match.group(1)
    if char is not None:
        return ESCAPE_CHARACTER_MAP[char]
    return "|0x" + match.group(2)


def escape_value(value: str) -> str:
    r"""Escape a parameter value for use inside single quotes.

    Replaces ``'``, newline, carriage return, ``|``, ``[`` and ``]`` with their
    ``|``-escaped forms, and a literal ``\uNNNN`` sequence with ``|0xNNNN``.
    All other characters, including non-ASCII text, pass through unchanged.

    Args:
        value (str): The raw value.

    Returns:
        str: The escaped value.
    """
    return _ESCAPE_RE.sub(_escape_match, value)


def _iter_entries(parameters: Parameters) -> list[tuple[str | None, str]]:
    """Normalize the accepted parameter shapes into ``(key | None, value)`` pairs."""
    if isinstance(parameters, Mapping):
        return [(key, value) for key, value in parameters.items()]

    entries: list[tuple[str | None, str]] = []
    entry: ParameterEntry
    for entry in parameters:
        if isinstance(entry, str):
            entries.append((None, entry))
        elif isinstance(entry, (tuple, list)) and len(entry) == 2:
            key, value = entry
            entries.append((key, value))
        else:
            raise InvalidArgumentError(
                f"Parameter entry must be a str or a (key, value) pair, got {entry!r}"
            )
    return entries


def format_message(message_name: str, parameters: Parameters = ()) -> str:
    """Return a service message formatted according to the TeamCity protocol.

    Validation happens before any text is built, so a bad name or key never
    results in partial output.

    Args:
        message_name (str): The message name (an identifier).
        parameters (Parameters): Ordered parameters: a mapping of key to value,
            or an iterable whose entries are ``(key, value)`` tuples or bare
            ``str`` values. A ``(None, value)`` tuple is a bare value too.
            Output order equals input order.

    Returns:
        str: One line of wire text, terminated by a single ``"\\n"``.

    Raises:
        InvalidIdentifierError: If the name or a key is not an identifier.
        InvalidArgumentError: If an entry is not a str or a (key, value) pair,
            or a value is not a string.
    """
    ensure_valid_identifier(message_name)
    entries: list[tuple[str | None, str]] = _iter_entries(parameters)
    for key, value in entries:
        if key is not None:
            ensure_valid_identifier(key)
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"Value of parameter {key!r} in {message_name!r} must be str, "
                f"got {type(value).__name__}"
            )

    parts: list[str] = [SERVICE_MESSAGE_PREFIX, message_name]
    for key, value in entries:
        if key is None:
            parts.append(f" '{escape_value(value)}'")
        else:
            parts.append(f" {key}='{escape_value(value)}'")
    parts.append(SERVICE_MESSAGE_SUFFIX)
    parts.append(LINE_TERMINATOR)

    text: str = "".join(parts)
    logger.trace("formatted %s with %d parameter(s)", message_name, len(entries))
    return text


def format_timestamp(date: datetime | None = None) -> str:
    """Return a date formatted for the ``timestamp`` message attribute.

    Args:
        date (datetime | None): The instant to format; ``None`` means now.
            Naive datetimes are interpreted as local time.

    Returns:
        str: ``YYYY-MM-DDTHH:MM:SS.ffffff±HHMM`` using the local UTC offset for
        naive or missing input, and the datetime's own offset otherwise.
    """
    if date is None:
        date = datetime.now()
    if date.tzinfo is None:
        date = date.astimezone()
    return date.strftime(TIMESTAMP_FORMAT)
