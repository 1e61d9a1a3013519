"""Lifecycle states of a tracking handle.

Enum used by ``TrackingHandle``. ``LIVE`` is the only non-terminal state.
"""

from __future__ import annotations

from enum import Enum


class HandleState(str, Enum):
    """``LIVE → {FULFILLED, REJECTED}`` on settlement, ``LIVE → CANCELED`` on cancel."""

    LIVE = "live"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"
    CANCELED = "canceled"

    @property
    def terminal(self) -> bool:
        return self is not HandleState.LIVE


__all__ = ["HandleState"]
