"""Construction facade producing an ``OperationStateKit``.

Purpose
-------
One call wires an ``ActionFactory``, a ``StateReducer``, an
``OperationTracker`` and a ``TrackerFactory`` around the same resolved action
types, and returns them as an immutable value object. There is no implicit
module-level instance; every caller builds its own kit.

Configuration
-------------
Settings (``optrack.config.get_tracking_settings``) only fill in what the
caller leaves unspecified: the kit's rejection policy, whether trackers log
structured events, and the default for ``ignore_superseded``.

Failure modes
-------------
- ``TrackingError(CONFIGURATION)`` for missing sinks / bound actions when a
  tracker is created, or for invalid settings.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..config import get_tracking_settings
from .actions import ActionFactory, ActionTypes, BoundActions, CustomizeActionType, bind_action_creators
from .cancellation import TrackingHandle
from .dto import Message, RejectionPolicy, TrackingSettings
from .interfaces import BoundDispatcher, Sink
from .reducer import StateReducer
from .settlement import DEFAULT_ADAPTERS, SettlementAdapter
from .tracker import OperationTracker
from .tracker_factory import Tracker, TrackerFactory


@dataclass(frozen=True)
class OperationStateKit:
    """Action types, message builders, reducer and trackers sharing one set of types."""

    actions: ActionFactory
    reducer: StateReducer
    operation_tracker: OperationTracker
    tracker_factory: TrackerFactory
    settings: TrackingSettings = field(default_factory=TrackingSettings)

    # resolved identifiers --------------------------------------------------
    @property
    def types(self) -> ActionTypes:
        return self.actions.types

    @property
    def SET_PENDING(self) -> str:  # noqa: N802 - mirrors the canonical constant
        return self.actions.types.pending

    @property
    def RESOLVE(self) -> str:  # noqa: N802
        return self.actions.types.resolved

    @property
    def REJECT(self) -> str:  # noqa: N802
        return self.actions.types.rejected

    # message builders ------------------------------------------------------
    def pending_message(self, pending: Any = True) -> Message:
        return self.actions.pending_message(pending)

    def resolved_message(self, value: Any = None) -> Message:
        return self.actions.resolved_message(value)

    def rejected_message(self, reason: Any) -> Message:
        return self.actions.rejected_message(reason)

    # tracking --------------------------------------------------------------
    def bind(self, sink: Sink) -> BoundActions:
        return bind_action_creators(self.actions, sink)

    def track(self, operation: Any, sink: Sink) -> TrackingHandle:
        return self.operation_tracker.track(operation, sink)

    def track_bound(self, operation: Any, bound: BoundDispatcher) -> TrackingHandle:
        return self.operation_tracker.track_bound(operation, bound)

    def create_tracker(
        self,
        sink: Sink,
        *,
        ignore_superseded: Optional[bool] = None,
        name: Optional[str] = None,
    ) -> Tracker:
        if ignore_superseded is None:
            ignore_superseded = self.settings.ignore_superseded
        return self.tracker_factory.create(sink, ignore_superseded=ignore_superseded, name=name)

    def create_bound_tracker(
        self,
        bound: BoundDispatcher,
        *,
        ignore_superseded: Optional[bool] = None,
        name: Optional[str] = None,
    ) -> Tracker:
        if ignore_superseded is None:
            ignore_superseded = self.settings.ignore_superseded
        return self.tracker_factory.create_bound(bound, ignore_superseded=ignore_superseded, name=name)


def create_operation_state(
    customize_action_type: Optional[CustomizeActionType] = None,
    *,
    rejection_policy: RejectionPolicy | str | None = None,
    settings: Optional[TrackingSettings] = None,
    adapters: Sequence[SettlementAdapter] = DEFAULT_ADAPTERS,
) -> OperationStateKit:
    """Build an ``OperationStateKit``.

    Parameters
    ----------
    customize_action_type:
        Renaming applied once to ``SET_PENDING``, ``RESOLVE`` and ``REJECT``
        (default identity).
    rejection_policy:
        Explicit failure-path policy; overrides ``settings``.
    settings:
        Pre-built settings; when omitted they are read through
        ``optrack.config``.
    adapters:
        Settlement adapters consulted in order for each tracked operation.
    """
    if settings is None:
        settings = get_tracking_settings()
    policy = RejectionPolicy(rejection_policy) if rejection_policy is not None else settings.rejection_policy

    actions = ActionFactory(customize_action_type)
    operation_tracker = OperationTracker(
        actions,
        rejection_policy=policy,
        adapters=adapters,
        log_events=settings.log_events,
    )
    return OperationStateKit(
        actions=actions,
        reducer=StateReducer(actions),
        operation_tracker=operation_tracker,
        tracker_factory=TrackerFactory(operation_tracker),
        settings=settings,
    )


__all__ = ["OperationStateKit", "create_operation_state"]
