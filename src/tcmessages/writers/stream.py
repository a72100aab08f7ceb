# topmark:header:start
#
#   project      : tcmessages
#   file         : stream.py
#   file_relpath : src/tcmessages/writers/stream.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Stream-backed writers."""

from __future__ import annotations

import sys
from typing import TextIO


class StreamWriter:
    """Writer that appends messages to a text stream.

    Args:
        stream (TextIO): Destination stream.
        flush (bool): If True, flush after every write so the CI server sees
            each message as soon as it is emitted.

    Attributes:
        stream (TextIO): Destination stream.
        flush (bool): Whether to flush after each write.
    """

    stream: TextIO
    flush: bool

    def __init__(self, stream: TextIO, *, flush: bool = True) -> None:
        self.stream = stream
        self.flush = flush

    def write(self, text: str) -> None:
        """Write ``text`` to the stream."""
        self.stream.write(text)
        if self.flush:
            self.stream.flush()


class StdoutWriter(StreamWriter):
    """Writer that echoes messages to standard output.

    ``sys.stdout`` is looked up on every write rather than captured at
    construction time, so redirection (``contextlib.redirect_stdout``, test
    runners) is honoured.
    """

    def __init__(self, *, flush: bool = True) -> None:
        super().__init__(sys.stdout, flush=flush)

    def write(self, text: str) -> None:
        """Write ``text`` to the current ``sys.stdout``."""
        self.stream = sys.stdout
        super().write(text)
