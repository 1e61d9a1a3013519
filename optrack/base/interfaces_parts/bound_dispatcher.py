"""BoundDispatcher Protocol (single-class module).

Action creators already bound to a dispatch function: calling one builds the
message and delivers it in the same step. Produced by
``optrack.base.actions.bind_action_creators``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BoundDispatcher(Protocol):
    """Pre-bound pending / resolved / rejected dispatchers."""

    def dispatch_pending(self, pending: Any = True) -> Any:  # pragma: no cover - interface
        ...

    def dispatch_resolved(self, value: Any = None) -> Any:  # pragma: no cover - interface
        ...

    def dispatch_rejected(self, reason: Any) -> Any:  # pragma: no cover - interface
        ...
