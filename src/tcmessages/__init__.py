# topmark:header:start
#
#   project      : tcmessages
#   file         : __init__.py
#   file_relpath : src/tcmessages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""tcmessages package.

tcmessages formats and emits TeamCity service messages so build scripts can
report progress, test results and build status to the CI server's log parser.
It exposes a typed logger facade, the underlying protocol formatter, a few
writers (sinks) and a small CLI.

Example:
    ```python
    from tcmessages import MessageLogger, StdoutWriter

    log = MessageLogger(StdoutWriter())
    with log.opened_block("compile"):
        log.message("building...")
    ```
"""

from __future__ import annotations

from tcmessages.core.errors import (
    InvalidArgumentError,
    InvalidIdentifierError,
    TcMessagesError,
)
from tcmessages.logger import MessageLogger
from tcmessages.protocol.formatter import (
    ensure_valid_identifier,
    escape_value,
    format_message,
    format_timestamp,
    is_valid_identifier,
)
from tcmessages.protocol.types import (
    BuildStatus,
    ImportType,
    MessageStatus,
    WhenNoDataPublished,
)
from tcmessages.writers import (
    BufferWriter,
    CallbackWriter,
    StdoutWriter,
    StreamWriter,
    Writer,
)

__all__ = [
    "BufferWriter",
    "BuildStatus",
    "CallbackWriter",
    "ImportType",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "MessageLogger",
    "MessageStatus",
    "StdoutWriter",
    "StreamWriter",
    "TcMessagesError",
    "WhenNoDataPublished",
    "Writer",
    "ensure_valid_identifier",
    "escape_value",
    "format_message",
    "format_timestamp",
    "is_valid_identifier",
]
