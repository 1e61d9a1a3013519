"""Rename operation-state fields for domain-specific vocabularies.

A subscription, for instance, reads better as
``{initializing, ready, stopped, error}`` than as
``{pending, fulfilled, rejected, reason}``. ``ProjectedReducer`` wraps a
``StateReducer`` and presents its state as a plain dict whose keys follow a
field map. Fields left out of the map are dropped from the projection.

Combine with ``ActionFactory(customize_action_type=...)`` to rename the
action types as well.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from .dto import Message, OperationState
from .errors import ErrorCode, TrackingError
from .reducer import StateReducer

_STATE_FIELDS = tuple(OperationState.model_fields)


class ProjectedReducer:
    """Reduce into an ``OperationState`` and project it through ``field_map``."""

    def __init__(self, reducer: StateReducer, field_map: Mapping[str, str]) -> None:
        unknown = sorted(set(field_map) - set(_STATE_FIELDS))
        if unknown:
            raise TrackingError(ErrorCode.CONFIGURATION, f"unknown operation state fields in projection: {unknown}")
        renamed = list(field_map.values())
        if len(set(renamed)) != len(renamed):
            raise TrackingError(ErrorCode.CONFIGURATION, "projection field names must be unique")
        self._reducer = reducer
        self._field_map = dict(field_map)

    def project(self, state: OperationState) -> Dict[str, Any]:
        return {target: getattr(state, source) for source, target in self._field_map.items()}

    def reduce(self, state: Optional[Dict[str, Any]], message: Message | Mapping[str, Any]) -> Dict[str, Any]:
        action_type = message.get("type") if isinstance(message, Mapping) else getattr(message, "type", None)
        if action_type not in self._reducer.types and state is not None:
            return state
        # the underlying reducer never reads prior state for recognized messages
        return self.project(self._reducer.reduce(None, message))

    __call__ = reduce


def project_reducer(reducer: StateReducer, field_map: Mapping[str, str]) -> ProjectedReducer:
    return ProjectedReducer(reducer, field_map)


__all__ = ["ProjectedReducer", "project_reducer"]
