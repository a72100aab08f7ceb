# topmark:header:start
#
#   project      : tcmessages
#   file         : errors.py
#   file_relpath : src/tcmessages/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Exceptions raised by the tcmessages library.

Formatting is pure and deterministic, so these errors always point at a caller
bug rather than a transient condition. They are raised before anything is
written to a writer. Errors raised by writers themselves are never wrapped.

The CLI maps them onto exit codes in `tcmessages.cli.errors`.
"""

from __future__ import annotations


class TcMessagesError(Exception):
    """Base class for all tcmessages library errors."""


class InvalidIdentifierError(TcMessagesError, ValueError):
    """A message name, parameter key or build problem identity is malformed.

    Attributes:
        value (object): The rejected value.
    """

    value: object

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Value {value!r} is not a valid identifier.")


class InvalidArgumentError(TcMessagesError, ValueError):
    """An operation was called in violation of its contract."""
