# topmark:header:start
#
#   project      : tcmessages
#   file         : exit_codes.py
#   file_relpath : src/tcmessages/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Exit codes for the tcmessages CLI.

Values follow the BSD `sysexits` convention where practical, so that build
scripts can tell a malformed message apart from a broken output pipe.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the tcmessages CLI.

    Attributes:
        SUCCESS: The message was written.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: Invalid identifier or argument; nothing was written.
            Mirrors BSD ``EX_DATAERR (65)``.
        IO_ERROR: Writing to the output failed. Mirrors BSD ``EX_IOERR (74)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR

    UNEXPECTED_ERROR = 255
