# topmark:header:start
#
#   project      : tcmessages
#   file         : __init__.py
#   file_relpath : src/tcmessages/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Core, framework-agnostic building blocks (errors, enum helpers)."""

from __future__ import annotations
