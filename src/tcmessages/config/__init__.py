# topmark:header:start
#
#   project      : tcmessages
#   file         : __init__.py
#   file_relpath : src/tcmessages/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Runtime configuration: diagnostic logging and environment lookups."""

from __future__ import annotations
