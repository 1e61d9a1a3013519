"""Settlement adapter for asyncio futures, tasks and awaitables.

Plain awaitables (coroutines included) are scheduled as tasks on the running
loop during ``prepare``; the task cannot make progress before the tracker's
synchronous pending emission because the loop only runs it after the caller
yields.

The continuation chain is a future on the same loop. A cancelled operation
settles as a failure whose reason is ``asyncio.CancelledError``.
"""
from __future__ import annotations

import asyncio
import inspect
from typing import Any

from ..errors import ErrorCode, TrackingError
from .settlement_adapter import Continuation, SettlementAdapter


class AsyncioSettlement(SettlementAdapter):
    """Adapter for ``asyncio.Future`` / ``asyncio.Task`` and awaitables."""

    name = "asyncio"

    def __init__(self, *, awaitables: bool = True) -> None:
        self._awaitables = awaitables

    def accepts(self, operation: Any) -> bool:
        if asyncio.isfuture(operation):
            return True
        return self._awaitables and inspect.isawaitable(operation)

    def prepare(self, operation: Any) -> Any:
        if asyncio.isfuture(operation):
            return operation
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise TrackingError(
                ErrorCode.UNSUPPORTED_OPERATION,
                "awaitables can only be tracked from inside a running event loop",
                raw=exc,
            ) from exc
        return asyncio.ensure_future(operation, loop=loop)

    def release(self, source: Any, operation: Any) -> None:
        # only the task scheduled by prepare is ours to cancel
        if operation is not source:
            operation.cancel()

    def attach(self, operation: Any, on_success: Continuation, on_failure: Continuation) -> Any:
        chain = operation.get_loop().create_future()

        def _relay(done: asyncio.Future) -> None:
            if done.cancelled():
                callback, argument = on_failure, asyncio.CancelledError()
            elif done.exception() is not None:
                callback, argument = on_failure, done.exception()
            else:
                callback, argument = on_success, done.result()
            try:
                result = callback(argument)
            except asyncio.CancelledError:
                chain.cancel()
            except Exception as exc:
                if not chain.done():
                    chain.set_exception(exc)
            else:
                if not chain.done():
                    chain.set_result(result)

        operation.add_done_callback(_relay)
        return chain


__all__ = ["AsyncioSettlement"]
