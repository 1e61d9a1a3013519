"""Operation tracker: keep an ``OperationState`` in sync with one operation.

Responsibilities:
  * Emit a pending message synchronously, before the operation can settle.
  * Register success / failure continuations through a settlement adapter.
  * Emit the terminal message only while the handle is still ``LIVE``.
  * Apply the configured ``RejectionPolicy`` on the failure path.

Cancellation (``handle.cancel()``) is advisory: the operation keeps running,
only this tracker's observation of it is suppressed. Suppressed failures are
never re-signaled.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .actions import ActionFactory
from .cancellation import HandleState, TrackingHandle
from .constants import PENDING_FAILED_REASON
from .dto import RejectionPolicy
from .emitter import Emitter
from .errors import ErrorCode, TrackingError, classify_exception
from .interfaces import BoundDispatcher, Sink
from .logging import LogContext, describe, get_logger, log_event
from .settlement import DEFAULT_ADAPTERS, SettlementAdapter, resolve_adapter


@dataclass(frozen=True)
class PreparedOperation:
    """An operation accepted by a settlement adapter but not yet tracked."""

    adapter: SettlementAdapter
    source: Any
    operation: Any


class OperationTracker:
    """Attach tracked operations to a sink through one ``ActionFactory``."""

    def __init__(
        self,
        actions: ActionFactory,
        *,
        rejection_policy: RejectionPolicy = RejectionPolicy.RETHROW,
        adapters: Sequence[SettlementAdapter] = DEFAULT_ADAPTERS,
        log_events: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if actions is None:
            raise TrackingError(ErrorCode.CONFIGURATION, "an ActionFactory is required to track operations")
        self._actions = actions
        self._policy = RejectionPolicy(rejection_policy)
        self._adapters = tuple(adapters)
        self._log_events = log_events
        self._logger = logger or get_logger(__name__)

    @property
    def actions(self) -> ActionFactory:
        return self._actions

    @property
    def rejection_policy(self) -> RejectionPolicy:
        return self._policy

    def track(self, operation: Any, sink: Sink, *, tracker: Optional[str] = None) -> TrackingHandle:
        """Track ``operation`` and deliver its messages to ``sink``."""
        return self.track_with(operation, Emitter.from_sink(self._actions, sink), tracker=tracker)

    def track_bound(self, operation: Any, bound: BoundDispatcher, *, tracker: Optional[str] = None) -> TrackingHandle:
        """Track ``operation`` through pre-bound action dispatchers."""
        return self.track_with(operation, Emitter.from_bound(bound), tracker=tracker)

    def track_with(self, operation: Any, emitter: Emitter, *, tracker: Optional[str] = None) -> TrackingHandle:
        return self.start(self.prepare(operation), emitter, tracker=tracker)

    def prepare(self, operation: Any) -> PreparedOperation:
        """Resolve the settlement adapter and normalize ``operation``.

        Nothing is emitted; unsupported operations (and awaitables outside a
        running loop) raise ``TrackingError(UNSUPPORTED_OPERATION)`` here.
        """
        adapter = resolve_adapter(operation, self._adapters)
        return PreparedOperation(adapter=adapter, source=operation, operation=adapter.prepare(operation))

    def start(self, prepared: PreparedOperation, emitter: Emitter, *, tracker: Optional[str] = None) -> TrackingHandle:
        """Emit pending for a prepared operation and attach its continuations.

        If the sink raises on the pending message the handle is canceled, any
        task scheduled by ``prepare`` is released and the error propagates.
        """
        adapter = prepared.adapter
        handle = TrackingHandle(prepared.operation, tracker=tracker)

        try:
            emitter.pending()
        except Exception as exc:
            handle.cancel(PENDING_FAILED_REASON)
            adapter.release(prepared.source, prepared.operation)
            self._log(
                "track.sink_error",
                handle,
                self._actions.types.pending,
                level=logging.ERROR,
                error=describe(exc),
            )
            raise
        self._log(
            "track.start",
            handle,
            self._actions.types.pending,
            adapter=adapter.name,
            rejection_policy=self._policy.value,
        )

        def _on_success(value: Any) -> None:
            resolved_type = self._actions.types.resolved
            try:
                emitted = handle.settle(HandleState.FULFILLED, lambda: emitter.resolved(value))
            except Exception as exc:
                self._log("track.sink_error", handle, resolved_type, level=logging.ERROR, error=describe(exc))
                raise
            if not emitted:
                self._log_suppressed(handle, resolved_type)
                return None
            self._log("track.emit", handle, resolved_type, value=describe(value))
            return None

        def _on_failure(reason: Any) -> None:
            rejected_type = self._actions.types.rejected
            try:
                emitted = handle.settle(HandleState.REJECTED, lambda: emitter.rejected(reason))
            except Exception as exc:
                self._log("track.sink_error", handle, rejected_type, level=logging.ERROR, error=describe(exc))
                raise
            if not emitted:
                self._log_suppressed(handle, rejected_type)
                return None
            self._log(
                "track.emit",
                handle,
                rejected_type,
                error_code=classify_exception(reason).value,
                reason=describe(reason),
            )
            if self._policy is RejectionPolicy.RETHROW:
                if isinstance(reason, BaseException):
                    raise reason
                raise TrackingError(
                    ErrorCode.OPERATION_FAILED,
                    f"operation rejected with {describe(reason)}",
                    tracker=handle.tracker,
                )
            return None

        handle.completion = adapter.attach(prepared.operation, _on_success, _on_failure)
        return handle

    def _log_suppressed(self, handle: TrackingHandle, action_type: str) -> None:
        self._log(
            "track.suppressed",
            handle,
            action_type,
            handle_state=handle.state.value,
            cancel_reason=handle.cancel_reason,
        )

    def _log(
        self,
        event: str,
        handle: TrackingHandle,
        action_type: str,
        *,
        level: int = logging.INFO,
        **fields: Any,
    ) -> None:
        if not self._log_events:
            return
        ctx = LogContext(tracker=handle.tracker, handle_id=handle.handle_id, action_type=action_type)
        log_event(self._logger, event, ctx, level=level, **fields)


__all__ = ["OperationTracker", "PreparedOperation"]
