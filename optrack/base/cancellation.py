"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the tracking handle and its state machine via the canonical
``optrack.base.cancellation`` import path while the concrete implementations
live under ``cancellation_parts``.

Notes
-----
- ``TrackingHandle`` is returned by every ``track`` call and by every tracker
  invocation; ``cancel()`` suppresses the handle's terminal emission.
- ``HandleState`` makes the suppression contract directly observable.
"""

from .cancellation_parts.handle_state import HandleState
from .cancellation_parts.tracking_handle import TrackingHandle

__all__ = ["HandleState", "TrackingHandle"]
