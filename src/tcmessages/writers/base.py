# topmark:header:start
#
#   project      : tcmessages
#   file         : base.py
#   file_relpath : src/tcmessages/writers/base.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Writer protocol shared by all message sinks."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Writer(Protocol):
    """Minimal interface for a service message sink.

    Implementations must not post-process the text and must accept any
    contents. A full message ends with a single ``"\\n"``; callers may
    concatenate several writes.

    Errors raised by ``write`` propagate to the caller unchanged.
    """

    def write(self, text: str) -> None:
        """Write one chunk of text."""
        ...
