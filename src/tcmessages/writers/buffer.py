# topmark:header:start
#
#   project      : tcmessages
#   file         : buffer.py
#   file_relpath : src/tcmessages/writers/buffer.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""In-memory writer, handy for tests and for deferring output."""

from __future__ import annotations


class BufferWriter:
    """Writer collecting messages in memory.

    Example:
        ```python
        buf = BufferWriter()
        MessageLogger(buf).message("hi")
        assert buf.lines()[0].startswith("##teamcity[message")
        ```
    """

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        """Append ``text`` to the buffer."""
        self._chunks.append(text)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._chunks)

    def lines(self) -> list[str]:
        """Return the buffered text split on ``"\\n"`` (terminators removed)."""
        text: str = self.getvalue()
        if not text:
            return []
        return text.removesuffix("\n").split("\n")

    def clear(self) -> None:
        """Discard the buffered text."""
        self._chunks.clear()
