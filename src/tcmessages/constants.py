# topmark:header:start
#
#   project      : tcmessages
#   file         : constants.py
#   file_relpath : src/tcmessages/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""tcmessages Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TCMESSAGES_VERSION: str = get_version("tcmessages")

# Every service message starts with this marker and ends with "]".
SERVICE_MESSAGE_PREFIX: Final[str] = "##teamcity["
SERVICE_MESSAGE_SUFFIX: Final[str] = "]"

# Each emitted message is one line terminated by exactly one newline.
LINE_TERMINATOR: Final[str] = "\n"

# Message creation timestamp: 2025-01-31T23:59:59.123456+0100
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%f%z"

# testFinished durations are reported in 100-nanosecond ticks.
TICKS_PER_SECOND: Final[int] = 10_000_000

# Environment variables
ENV_LOG_LEVEL: Final[str] = "TCMESSAGES_LOG_LEVEL"
ENV_FLOW_ID: Final[str] = "TCMESSAGES_FLOW_ID"
ENV_TEAMCITY_VERSION: Final[str] = "TEAMCITY_VERSION"
