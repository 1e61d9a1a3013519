"""Canonical action type names and shared sentinel strings.

Central location to avoid scattering magic strings across the action factory,
the reducer and the tracker. The canonical names are the inputs to a
factory's ``customize_action_type`` callable; they are never matched directly
by a reducer built with a renaming function.
"""
from __future__ import annotations

# Canonical action type names
SET_PENDING = "SET_PENDING"
RESOLVE = "RESOLVE"
REJECT = "REJECT"

CANONICAL_ACTION_TYPES = (SET_PENDING, RESOLVE, REJECT)

# Cancel reason recorded when a tracker supersedes its previous handle
SUPERSEDED_REASON = "superseded"

# Cancel reason recorded when the sink raises on the pending message
PENDING_FAILED_REASON = "pending emission failed"

# Name used for the shared logger and as the env var prefix
PACKAGE_LOGGER_NAME = "optrack"

__all__ = [
    "SET_PENDING",
    "RESOLVE",
    "REJECT",
    "CANONICAL_ACTION_TYPES",
    "SUPERSEDED_REASON",
    "PENDING_FAILED_REASON",
    "PACKAGE_LOGGER_NAME",
]
