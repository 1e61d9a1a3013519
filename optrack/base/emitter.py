"""Message delivery paths used by the tracker.

A tracker delivers through one of two explicitly named paths:

* ``Emitter.from_sink``: build messages with an ``ActionFactory`` and hand
  them to a raw sink (``dispatch``);
* ``Emitter.from_bound``: call pre-bound dispatchers that build and deliver in
  one step.

Both validate their inputs at construction so a missing sink fails when the
tracker is created, not when the operation settles.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .actions import ActionFactory
from .errors import ErrorCode, TrackingError
from .interfaces import BoundDispatcher, Sink


@dataclass(frozen=True)
class Emitter:
    """Three delivery callables for one tracked operation."""

    pending: Callable[[], Any]
    resolved: Callable[[Any], Any]
    rejected: Callable[[Any], Any]

    @classmethod
    def from_sink(cls, actions: ActionFactory, sink: Sink) -> "Emitter":
        if actions is None:
            raise TrackingError(ErrorCode.CONFIGURATION, "an ActionFactory is required to emit messages")
        if sink is None or not callable(sink):
            raise TrackingError(ErrorCode.CONFIGURATION, "a callable sink is required to emit messages")
        return cls(
            pending=lambda: sink(actions.pending_message(True)),
            resolved=lambda value: sink(actions.resolved_message(value)),
            rejected=lambda reason: sink(actions.rejected_message(reason)),
        )

    @classmethod
    def from_bound(cls, bound: BoundDispatcher) -> "Emitter":
        if bound is None or not isinstance(bound, BoundDispatcher):
            raise TrackingError(
                ErrorCode.CONFIGURATION,
                "bound actions must provide dispatch_pending, dispatch_resolved and dispatch_rejected",
            )
        return cls(
            pending=lambda: bound.dispatch_pending(True),
            resolved=bound.dispatch_resolved,
            rejected=bound.dispatch_rejected,
        )


__all__ = ["Emitter"]
