"""Shared testing doubles for tracker scenarios.

Exports:
    - ManualOperation: promise-like operation settled by hand
    - FakeClock: millisecond timer wheel producing timed ManualOperations
    - Store: minimal state container whose ``dispatch`` is a sink
"""
from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable, List, Optional, Tuple


class ManualOperation:
    """Promise-like test double exposing ``then(on_success, on_failure)``.

    Continuations registered after settlement run immediately. A continuation
    that raises leaves the returned chain rejected with that exception.
    """

    def __init__(self) -> None:
        self._outcome: Optional[Tuple[str, Any]] = None
        self._callbacks: List[Callable[[str, Any], None]] = []

    @property
    def settled(self) -> bool:
        return self._outcome is not None

    @property
    def failed(self) -> bool:
        return self._outcome is not None and self._outcome[0] == "err"

    @property
    def result(self) -> Any:
        assert self._outcome is not None  # nosec B101 - test helper
        return self._outcome[1]

    def then(self, on_success: Callable[[Any], Any], on_failure: Callable[[Any], Any]) -> "ManualOperation":
        chain = ManualOperation()

        def _run(kind: str, argument: Any) -> None:
            callback = on_success if kind == "ok" else on_failure
            try:
                value = callback(argument)
            except Exception as exc:  # mirrors promise chaining
                chain.reject(exc)
            else:
                chain.resolve(value)

        if self._outcome is not None:
            _run(*self._outcome)
        else:
            self._callbacks.append(_run)
        return chain

    def resolve(self, value: Any = None) -> None:
        self._settle(("ok", value))

    def reject(self, reason: Any) -> None:
        self._settle(("err", reason))

    def _settle(self, outcome: Tuple[str, Any]) -> None:
        if self._outcome is not None:
            return
        self._outcome = outcome
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(*outcome)


class FakeClock:
    """Millisecond timer wheel advanced explicitly with ``tick``."""

    def __init__(self) -> None:
        self.now = 0
        self._seq = itertools.count()
        self._timers: List[Tuple[int, int, Callable[[], None]]] = []

    def call_later(self, delay: int, fn: Callable[[], None]) -> None:
        heapq.heappush(self._timers, (self.now + delay, next(self._seq), fn))

    def tick(self, ms: int) -> None:
        target = self.now + ms
        while self._timers and self._timers[0][0] <= target:
            due, _, fn = heapq.heappop(self._timers)
            self.now = due
            fn()
        self.now = target

    def resolve_after(self, delay: int, value: Any = None) -> ManualOperation:
        op = ManualOperation()
        self.call_later(delay, lambda: op.resolve(value))
        return op

    def reject_after(self, delay: int, reason: Any) -> ManualOperation:
        op = ManualOperation()
        self.call_later(delay, lambda: op.reject(reason))
        return op


class Store:
    """Minimal state container: ``dispatch`` reduces and records messages."""

    def __init__(self, reducer: Callable[[Any, Any], Any]) -> None:
        self._reducer = reducer
        self.messages: List[Any] = []
        self.state = reducer(None, {"type": "@@INIT"})

    def dispatch(self, message: Any) -> Any:
        self.messages.append(message)
        self.state = self._reducer(self.state, message)
        return message

    def get_state(self) -> Any:
        return self.state

    def types(self) -> List[str]:
        return [m.type for m in self.messages]


__all__ = ["ManualOperation", "FakeClock", "Store"]
