# topmark:header:start
#
#   project      : tcmessages
#   file         : __init__.py
#   file_relpath : src/tcmessages/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Click-based command-line interface for emitting service messages from shell steps."""

from __future__ import annotations
