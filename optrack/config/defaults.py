"""optrack.config.defaults
=======================

Central place for the small, stable default values of the tracking layer.
These can be overridden via environment variables or an external
configuration file, but provide the documented behaviour when nothing is set.

This module intentionally avoids importing from other optrack packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Tracker behaviour ----

# Trackers deliver every settlement unless callers opt into "last call wins".
DEFAULT_IGNORE_SUPERSEDED = False
# Failure path: emit the rejected message, then re-signal the failure.
DEFAULT_REJECTION_POLICY = "rethrow"

# ---- Logging ----

# Emit structured track.* events through the optrack logger.
DEFAULT_LOG_EVENTS = True

# Section of the external config file holding tracking settings.
CONFIG_FILE_SECTION = "tracking"

__all__ = [
    "DEFAULT_IGNORE_SUPERSEDED",
    "DEFAULT_REJECTION_POLICY",
    "DEFAULT_LOG_EVENTS",
    "CONFIG_FILE_SECTION",
]
