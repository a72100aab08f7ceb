# topmark:header:start
#
#   project      : tcmessages
#   file         : __init__.py
#   file_relpath : src/tcmessages/writers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Writers deliver formatted service messages somewhere.

A writer is anything with a ``write(text: str) -> None`` method (see
[`tcmessages.writers.base.Writer`][]). The bundled implementations cover the
usual cases: a text stream, the current standard output, a callback and an
in-memory buffer.
"""

from __future__ import annotations

from tcmessages.writers.base import Writer
from tcmessages.writers.buffer import BufferWriter
from tcmessages.writers.callback import CallbackWriter
from tcmessages.writers.stream import StdoutWriter, StreamWriter

__all__ = [
    "BufferWriter",
    "CallbackWriter",
    "StdoutWriter",
    "StreamWriter",
    "Writer",
]
