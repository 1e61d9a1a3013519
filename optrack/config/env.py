"""optrack.config.env
==================

Centralized environment variable names and parsing helpers.

Design Notes
------------
- ``ENV_FIELD_MAP`` maps each ``TrackingSettings`` field to its environment
  variable; ``OPTRACK_CONFIG_FILE`` points at an optional JSON/YAML file.
- Helpers never raise on unset variables; values are handed to pydantic for
  validation by the config layer.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

ENV_PREFIX = "OPTRACK_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG_FILE"

ENV_FIELD_MAP: Dict[str, str] = {
    "ignore_superseded": f"{ENV_PREFIX}IGNORE_SUPERSEDED",
    "rejection_policy": f"{ENV_PREFIX}REJECTION_POLICY",
    "log_events": f"{ENV_PREFIX}LOG_EVENTS",
}


def read_env(name: str) -> Optional[str]:
    """Return a stripped environment value, treating blanks as unset."""
    val = os.getenv(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


def env_overrides() -> Dict[str, Any]:
    """Collect settings fields present in the environment.

    Policy names are lowercased so ``RETHROW`` and ``rethrow`` both validate.
    """
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        val = read_env(env_name)
        if val is None:
            continue
        out[field] = val.lower() if field == "rejection_policy" else val
    return out


__all__ = ["ENV_PREFIX", "CONFIG_FILE_ENV", "ENV_FIELD_MAP", "read_env", "env_overrides"]
