"""Per-operation tracking handle with cooperative cancellation.

Exposes the ``TrackingHandle`` returned by every ``track`` call. Cancelling a
handle only suppresses the tracker's own terminal emission; the underlying
operation keeps running to completion.
"""

from __future__ import annotations

import uuid
from threading import RLock
from typing import Any, Callable, Optional

from .handle_state import HandleState


class TrackingHandle:
    """Identity of one tracked operation plus its emission state machine.

    Thread-safe. The terminal emission runs under the handle's lock, so once
    ``cancel`` returns no emission for this handle is in flight or can start.
    The lock is re-entrant so a sink may cancel the handle it is being called
    from.
    """

    def __init__(self, operation: Any, *, tracker: Optional[str] = None) -> None:
        self._operation = operation
        self._tracker = tracker
        self._state = HandleState.LIVE
        self._cancel_reason: Optional[str] = None
        self._lock = RLock()
        self.handle_id = uuid.uuid4().hex[:12]
        # continuation chain; filled in once continuations are registered
        self.completion: Any = None

    @property
    def operation(self) -> Any:
        return self._operation

    @property
    def tracker(self) -> Optional[str]:
        return self._tracker

    @property
    def state(self) -> HandleState:  # noqa: D401 - short form
        """Current lifecycle state."""
        return self._state

    @property
    def live(self) -> bool:
        return self._state is HandleState.LIVE

    @property
    def cancelled(self) -> bool:
        return self._state is HandleState.CANCELED

    @property
    def settled(self) -> bool:
        return self._state in (HandleState.FULFILLED, HandleState.REJECTED)

    @property
    def cancel_reason(self) -> Optional[str]:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._cancel_reason

    def cancel(self, reason: Optional[str] = None) -> bool:
        """Suppress any later emission for this handle.

        Idempotent and safe after settlement (no effect). Returns ``True`` only
        for the call that moved the handle from ``LIVE`` to ``CANCELED``.
        """
        with self._lock:
            if self._state is not HandleState.LIVE:
                return False
            self._state = HandleState.CANCELED
            self._cancel_reason = reason
            return True

    def settle(self, outcome: HandleState, emit: Callable[[], Any]) -> bool:
        """Move ``LIVE → outcome`` and run ``emit`` atomically.

        Returns ``False`` without calling ``emit`` when the handle already left
        ``LIVE``. Exceptions from ``emit`` propagate; the transition stands.
        """
        if outcome not in (HandleState.FULFILLED, HandleState.REJECTED):
            raise ValueError(f"settlement outcome must be fulfilled or rejected, got {outcome!r}")
        with self._lock:
            if self._state is not HandleState.LIVE:
                return False
            self._state = outcome
            emit()
            return True

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"TrackingHandle(id={self.handle_id!r}, tracker={self._tracker!r}, "
            f"state={self._state.value!r}, cancel_reason={self._cancel_reason!r})"
        )


__all__ = ["TrackingHandle"]
