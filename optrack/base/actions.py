"""Action message factory with configurable type identifiers.

Purpose
-------
Build the three messages that drive an ``OperationState``:

* pending  → ``{type: <pending>,  payload: flag}`` (any value, kept verbatim)
* resolved → ``{type: <resolved>, payload: value}``
* rejected → ``{type: <rejected>, payload: reason, error: True}``

Type identifiers are resolved once, at construction, by applying an optional
``customize_action_type`` callable to the canonical names ``SET_PENDING``,
``RESOLVE`` and ``REJECT``. A reducer built from the same factory matches on
exactly these identifiers, so several operation states can live side by side
in one container (``"users/SET_PENDING"``, ``"orders/SET_PENDING"``...).

No side effects; pure construction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .constants import CANONICAL_ACTION_TYPES
from .dto import Message
from .errors import ErrorCode, TrackingError
from .interfaces import Sink

CustomizeActionType = Callable[[str], str]


@dataclass(frozen=True)
class ActionTypes:
    """The three resolved action type identifiers of one factory."""

    pending: str
    resolved: str
    rejected: str

    def __contains__(self, action_type: object) -> bool:
        return action_type in (self.pending, self.resolved, self.rejected)

    def __iter__(self) -> Iterator[str]:
        return iter((self.pending, self.resolved, self.rejected))


def _identity(action_type: str) -> str:
    return action_type


class ActionFactory:
    """Build pending / resolved / rejected messages with fixed type identifiers."""

    def __init__(self, customize_action_type: Optional[CustomizeActionType] = None) -> None:
        customize = customize_action_type or _identity
        self._types = ActionTypes(*(customize(name) for name in CANONICAL_ACTION_TYPES))

    @property
    def types(self) -> ActionTypes:
        return self._types

    def pending_message(self, pending: Any = True) -> Message:
        return Message(type=self._types.pending, payload=pending)

    def resolved_message(self, value: Any = None) -> Message:
        return Message(type=self._types.resolved, payload=value)

    def rejected_message(self, reason: Any) -> Message:
        return Message(type=self._types.rejected, payload=reason, error=True)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"ActionFactory(types={self._types!r})"


@dataclass(frozen=True)
class BoundActions:
    """Action creators bound to a sink; each call builds and dispatches."""

    actions: ActionFactory
    sink: Sink

    def dispatch_pending(self, pending: Any = True) -> Any:
        return self.sink(self.actions.pending_message(pending))

    def dispatch_resolved(self, value: Any = None) -> Any:
        return self.sink(self.actions.resolved_message(value))

    def dispatch_rejected(self, reason: Any) -> Any:
        return self.sink(self.actions.rejected_message(reason))


def bind_action_creators(actions: ActionFactory, sink: Sink) -> BoundActions:
    """Bind ``actions`` to ``sink`` (the dispatch function of a host container).

    Raises
    ------
    TrackingError
        ``CONFIGURATION`` when either argument is missing.
    """
    if actions is None:
        raise TrackingError(ErrorCode.CONFIGURATION, "an ActionFactory is required to bind action creators")
    if sink is None or not callable(sink):
        raise TrackingError(ErrorCode.CONFIGURATION, "a callable sink is required to bind action creators")
    return BoundActions(actions=actions, sink=sink)


__all__ = [
    "ActionTypes",
    "ActionFactory",
    "BoundActions",
    "bind_action_creators",
    "CustomizeActionType",
]
