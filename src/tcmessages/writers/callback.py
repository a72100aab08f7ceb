# topmark:header:start
#
#   project      : tcmessages
#   file         : callback.py
#   file_relpath : src/tcmessages/writers/callback.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Writer that forwards messages to a callable."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CallbackWriter:
    """Writer passing each message to ``callback`` unchanged.

    Args:
        callback (Callable[[str], object]): Called with the raw message text.
            Its return value is ignored.
    """

    def __init__(self, callback: Callable[[str], object]) -> None:
        self.callback = callback

    def write(self, text: str) -> None:
        """Pass ``text`` to the callback."""
        self.callback(text)
