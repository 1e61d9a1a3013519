"""Failure-path policy for tracked operations (single-class module)."""
from __future__ import annotations

from enum import Enum


class RejectionPolicy(str, Enum):
    """How a tracker treats a failure after emitting the rejected message.

    ``ABSORB``
        Emit the rejected message and stop; the handle's completion settles
        successfully with ``None``.
    ``RETHROW``
        Emit the rejected message, then leave the handle's completion failed
        with the original reason so upstream failure monitors still fire.
    """

    ABSORB = "absorb"
    RETHROW = "rethrow"


__all__ = ["RejectionPolicy"]
