# topmark:header:start
#
#   project      : tcmessages
#   file         : __init__.py
#   file_relpath : src/tcmessages/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""tcmessages CLI subcommands."""

from __future__ import annotations
