"""Stateful trackers remembering the most recently tracked operation.

A ``Tracker`` holds one slot with the handle it returned last. With
``ignore_superseded`` enabled it cancels that handle before tracking a new
operation, so at most one operation's terminal message ever reaches the sink
("last call wins"); an older operation that settles later is suppressed for
good.

With ``ignore_superseded`` disabled (the default) every terminal message is
delivered in real settlement order. Because the reducer derives state from
the latest message only, a slow earlier operation settling after a fast later
one overwrites the later result. That is the documented behaviour of the
non-suppressing mode.
"""
from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Optional

from .cancellation import TrackingHandle
from .constants import SUPERSEDED_REASON
from .emitter import Emitter
from .errors import ErrorCode, TrackingError
from .interfaces import BoundDispatcher, Sink
from .logging import LogContext, get_logger, log_event
from .tracker import OperationTracker


class Tracker:
    """Callable ``tracker(operation, override_sink=None) -> TrackingHandle``."""

    def __init__(
        self,
        operation_tracker: OperationTracker,
        emitter: Emitter,
        *,
        ignore_superseded: bool = False,
        name: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._operation_tracker = operation_tracker
        self._emitter = emitter
        self._ignore_superseded = ignore_superseded
        self._name = name
        self._current: Optional[TrackingHandle] = None
        # read-cancel-replace must not interleave with another call
        self._lock = RLock()
        self._logger = logger or get_logger(__name__)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def ignore_superseded(self) -> bool:
        return self._ignore_superseded

    @property
    def current(self) -> Optional[TrackingHandle]:  # noqa: D401 - short property
        """Handle returned by the most recent call, if any."""
        return self._current

    def __call__(self, operation: Any, override_sink: Optional[Sink] = None) -> TrackingHandle:
        """Track ``operation``, superseding the previous handle when configured.

        An operation that cannot be tracked raises before the previous handle
        is touched. A sink raising on the pending message happens after the
        supersede step: the previous handle stays canceled and remains in the
        slot.
        """
        emitter = self._emitter
        if override_sink is not None:
            emitter = Emitter.from_sink(self._operation_tracker.actions, override_sink)
        with self._lock:
            prepared = self._operation_tracker.prepare(operation)
            previous = self._current
            if self._ignore_superseded and previous is not None and previous.cancel(SUPERSEDED_REASON):
                log_event(
                    self._logger,
                    "tracker.supersede",
                    LogContext(tracker=self._name, handle_id=previous.handle_id),
                    level=logging.DEBUG,
                )
            handle = self._operation_tracker.start(prepared, emitter, tracker=self._name)
            self._current = handle
        return handle

    def cancel(self, reason: Optional[str] = None) -> bool:
        """Cancel the current handle (if any); returns whether it was live."""
        with self._lock:
            return self._current.cancel(reason) if self._current is not None else False

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Tracker(name={self._name!r}, ignore_superseded={self._ignore_superseded}, current={self._current!r})"


class TrackerFactory:
    """Create ``Tracker`` instances sharing one ``OperationTracker``."""

    def __init__(self, operation_tracker: OperationTracker, *, logger: Optional[logging.Logger] = None) -> None:
        if operation_tracker is None:
            raise TrackingError(ErrorCode.CONFIGURATION, "an OperationTracker is required to create trackers")
        self._operation_tracker = operation_tracker
        self._logger = logger or get_logger(__name__)

    def create(self, sink: Sink, *, ignore_superseded: bool = False, name: Optional[str] = None) -> Tracker:
        """Tracker delivering to a raw ``sink``."""
        emitter = Emitter.from_sink(self._operation_tracker.actions, sink)
        return self._build(emitter, ignore_superseded=ignore_superseded, name=name, path="sink")

    def create_bound(
        self,
        bound: BoundDispatcher,
        *,
        ignore_superseded: bool = False,
        name: Optional[str] = None,
    ) -> Tracker:
        """Tracker delivering through pre-bound action dispatchers."""
        emitter = Emitter.from_bound(bound)
        return self._build(emitter, ignore_superseded=ignore_superseded, name=name, path="bound")

    def _build(self, emitter: Emitter, *, ignore_superseded: bool, name: Optional[str], path: str) -> Tracker:
        log_event(
            self._logger,
            "tracker.create",
            LogContext(tracker=name),
            level=logging.DEBUG,
            path=path,
            ignore_superseded=ignore_superseded,
        )
        return Tracker(
            self._operation_tracker,
            emitter,
            ignore_superseded=ignore_superseded,
            name=name,
            logger=self._logger,
        )


__all__ = ["Tracker", "TrackerFactory"]
