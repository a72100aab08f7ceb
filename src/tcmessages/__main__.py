# topmark:header:start
#
#   project      : tcmessages
#   file         : __main__.py
#   file_relpath : src/tcmessages/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Module entry point for running tcmessages via ``python -m tcmessages``.

Delegates to :func:`tcmessages.cli.main.cli`, the same entry point as the
``tcmessages`` console script.

Examples:
    Emit a build number from a shell step::

        python -m tcmessages build-number 1.4.2
"""

from __future__ import annotations

from tcmessages.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
