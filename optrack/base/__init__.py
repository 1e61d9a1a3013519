"""
Tracking Base Package

Exports the operation-state core for use by host applications:
- Actions: ``ActionFactory`` with resolved, renameable action types
- Reducer: pure ``StateReducer`` and ``INITIAL_OPERATION_STATE``
- Tracking: ``OperationTracker`` / ``TrackerFactory`` and ``TrackingHandle``
- Settlement: adapters for asyncio, concurrent.futures and thenables
- Factory: ``create_operation_state`` building an ``OperationStateKit``
"""

from .constants import SET_PENDING, RESOLVE, REJECT
from .actions import ActionFactory, ActionTypes, BoundActions, bind_action_creators
from .cancellation import HandleState, TrackingHandle
from .dto import Message, OperationState, RejectionPolicy, TrackingSettings
from .emitter import Emitter
from .errors import ErrorCode, TrackingError, classify_exception
from .interfaces import BoundDispatcher, Settleable, Sink
from .projection import ProjectedReducer, project_reducer
from .reducer import INITIAL_OPERATION_STATE, StateReducer
from .settlement import (
    DEFAULT_ADAPTERS,
    AsyncioSettlement,
    FutureSettlement,
    SettlementAdapter,
    ThenableSettlement,
    resolve_adapter,
)
from .tracker import OperationTracker, PreparedOperation
from .tracker_factory import Tracker, TrackerFactory
from .factory import OperationStateKit, create_operation_state

__all__ = [
    # Constants
    "SET_PENDING",
    "RESOLVE",
    "REJECT",
    # Actions
    "ActionFactory",
    "ActionTypes",
    "BoundActions",
    "bind_action_creators",
    # Models
    "Message",
    "OperationState",
    "RejectionPolicy",
    "TrackingSettings",
    # Reducer
    "StateReducer",
    "INITIAL_OPERATION_STATE",
    "ProjectedReducer",
    "project_reducer",
    # Tracking
    "HandleState",
    "TrackingHandle",
    "Emitter",
    "OperationTracker",
    "PreparedOperation",
    "Tracker",
    "TrackerFactory",
    # Settlement
    "SettlementAdapter",
    "AsyncioSettlement",
    "FutureSettlement",
    "ThenableSettlement",
    "DEFAULT_ADAPTERS",
    "resolve_adapter",
    # Interfaces
    "Sink",
    "Settleable",
    "BoundDispatcher",
    # Errors
    "ErrorCode",
    "TrackingError",
    "classify_exception",
    # Factory
    "OperationStateKit",
    "create_operation_state",
]
