"""Settlement adapter for ``concurrent.futures.Future``.

Continuations run in whichever thread completes the future (an executor
worker, or the caller itself when the future is already done at attach time).
The continuation chain is a fresh ``concurrent.futures.Future``.
"""
from __future__ import annotations

import concurrent.futures
from typing import Any

from .settlement_adapter import Continuation, SettlementAdapter


class FutureSettlement(SettlementAdapter):
    """Adapter for thread / process pool futures."""

    name = "concurrent.futures"

    def accepts(self, operation: Any) -> bool:
        return isinstance(operation, concurrent.futures.Future)

    def attach(self, operation: Any, on_success: Continuation, on_failure: Continuation) -> Any:
        chain: concurrent.futures.Future = concurrent.futures.Future()

        def _relay(done: concurrent.futures.Future) -> None:
            if done.cancelled():
                callback, argument = on_failure, concurrent.futures.CancelledError()
            elif done.exception() is not None:
                callback, argument = on_failure, done.exception()
            else:
                callback, argument = on_success, done.result()
            try:
                result = callback(argument)
            except concurrent.futures.CancelledError:
                chain.cancel()
                chain.set_running_or_notify_cancel()
            except Exception as exc:
                chain.set_exception(exc)
            else:
                chain.set_result(result)

        operation.add_done_callback(_relay)
        return chain


__all__ = ["FutureSettlement"]
