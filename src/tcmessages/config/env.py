# topmark:header:start
#
#   project      : tcmessages
#   file         : env.py
#   file_relpath : src/tcmessages/config/env.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Environment lookups used to configure tcmessages at runtime."""

from __future__ import annotations

import os

from tcmessages.constants import ENV_FLOW_ID, ENV_TEAMCITY_VERSION


def resolve_env_flow_id() -> str | None:
    """Return the default flow id from TCMESSAGES_FLOW_ID, or None if unset or blank."""
    val = os.environ.get(ENV_FLOW_ID)
    if val is None or not val.strip():
        return None
    return val.strip()


def is_running_under_teamcity() -> bool:
    """Return True when the process runs inside a TeamCity build agent.

    TeamCity exports TEAMCITY_VERSION to every build step.
    """
    return bool(os.environ.get(ENV_TEAMCITY_VERSION, "").strip())
