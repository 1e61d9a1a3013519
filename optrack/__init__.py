"""optrack package

Track the lifecycle of an asynchronous operation (pending → fulfilled /
rejected) as a small immutable state value held by an external state
container, with "last call wins" suppression of superseded operations.

Public API (re-exported):
    - Version: ``__version__``
    - Canonical action types: ``SET_PENDING``, ``RESOLVE``, ``REJECT``
    - Factory: :func:`create_operation_state` → :class:`OperationStateKit`
    - Building blocks: :class:`ActionFactory`, :class:`StateReducer`,
      :class:`OperationTracker`, :class:`TrackerFactory`
    - State / messages: :class:`OperationState`, :class:`Message`,
      ``INITIAL_OPERATION_STATE``
    - Errors: :class:`TrackingError`, :class:`ErrorCode`

Example::

    kit = create_operation_state(lambda t: f"users/{t}")
    track = kit.create_tracker(store.dispatch, ignore_superseded=True)
    track(asyncio.ensure_future(fetch_users()))
"""

from .base import (
    SET_PENDING,
    RESOLVE,
    REJECT,
    INITIAL_OPERATION_STATE,
    ActionFactory,
    ActionTypes,
    BoundActions,
    ErrorCode,
    HandleState,
    Message,
    OperationState,
    OperationStateKit,
    OperationTracker,
    ProjectedReducer,
    RejectionPolicy,
    StateReducer,
    Tracker,
    TrackerFactory,
    TrackingError,
    TrackingHandle,
    TrackingSettings,
    bind_action_creators,
    create_operation_state,
    project_reducer,
)
from .base.logging import configure_logger, get_logger
from .config import get_tracking_settings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SET_PENDING",
    "RESOLVE",
    "REJECT",
    "INITIAL_OPERATION_STATE",
    "ActionFactory",
    "ActionTypes",
    "BoundActions",
    "bind_action_creators",
    "Message",
    "OperationState",
    "StateReducer",
    "ProjectedReducer",
    "project_reducer",
    "OperationTracker",
    "Tracker",
    "TrackerFactory",
    "TrackingHandle",
    "HandleState",
    "RejectionPolicy",
    "TrackingSettings",
    "OperationStateKit",
    "create_operation_state",
    "get_tracking_settings",
    "ErrorCode",
    "TrackingError",
    "configure_logger",
    "get_logger",
]
