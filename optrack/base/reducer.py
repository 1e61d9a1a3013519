"""Pure operation-state reducer.

(state, message) -> new_state

Rules:
- Pure: no side effects, no IO, no clocks.
- Total: unrecognized messages are an identity passthrough (or produce the
  canonical default state when no prior state exists), never an error.
- The new state is computed from the message alone; the prior state is only
  consulted to decide the passthrough branch.

Messages may be ``Message`` instances or plain mappings with ``type`` and
``payload`` keys, since host containers dispatch unrelated plain actions
through every reducer.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .actions import ActionFactory, ActionTypes
from .dto import Message, OperationState
from .errors import ErrorCode, TrackingError


def _field(message: Any, name: str) -> Any:
    if isinstance(message, Mapping):
        return message.get(name)
    return getattr(message, name, None)


class StateReducer:
    """Fold messages of one ``ActionFactory`` into an ``OperationState``."""

    def __init__(self, actions: ActionFactory) -> None:
        if actions is None:
            raise TrackingError(ErrorCode.CONFIGURATION, "an ActionFactory is required to build a reducer")
        self._types: ActionTypes = actions.types

    @property
    def types(self) -> ActionTypes:
        return self._types

    def reduce(self, state: Optional[OperationState], message: Message | Mapping[str, Any]) -> OperationState:
        action_type = _field(message, "type")
        if action_type not in self._types:
            return state if state is not None else OperationState()

        payload = _field(message, "payload")
        fulfilled = action_type == self._types.resolved
        rejected = action_type == self._types.rejected
        return OperationState(
            pending=payload if action_type == self._types.pending else False,
            fulfilled=fulfilled,
            rejected=rejected,
            value=payload if fulfilled else None,
            reason=payload if rejected else None,
        )

    __call__ = reduce


INITIAL_OPERATION_STATE: OperationState = StateReducer(ActionFactory()).reduce(None, Message(type=""))

__all__ = ["StateReducer", "INITIAL_OPERATION_STATE"]
