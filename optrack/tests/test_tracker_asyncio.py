"""Tracking asyncio futures, tasks and coroutines.

Scenarios run inside ``asyncio.run`` with short ``call_later`` timers; the
settlement order (op2 before op1) is fixed by the timer deadlines.
"""
from __future__ import annotations

import asyncio
from typing import Any, Optional

import pytest

from optrack import HandleState, OperationState, RejectionPolicy, TrackingError, create_operation_state
from optrack.base.dto import TrackingSettings
from optrack.base.errors import ErrorCode
from optrack.tests.utils import Store


def _settle_later(delay: float, value: Any = None, error: Optional[BaseException] = None) -> asyncio.Future:
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def _settle() -> None:
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(value)

    loop.call_later(delay, _settle)
    return future


async def _drain(*handles) -> None:
    await asyncio.wait([h.completion for h in handles])


def test_pending_then_resolved_with_future(kit, store):
    async def scenario() -> None:
        handle = kit.track(_settle_later(0.01, 1), store.dispatch)
        assert store.get_state() == OperationState(pending=True)  # nosec B101
        await _drain(handle)
        assert handle.state is HandleState.FULFILLED  # nosec B101

    asyncio.run(scenario())

    assert store.get_state() == OperationState(fulfilled=True, value=1)  # nosec B101


def test_coroutine_is_scheduled_and_tracked(kit, store):
    async def work() -> int:
        await asyncio.sleep(0)
        return 5

    async def scenario() -> None:
        handle = kit.track(work(), store.dispatch)
        assert isinstance(handle.operation, asyncio.Task)  # nosec B101
        assert store.types() == ["SET_PENDING"]  # nosec B101
        await _drain(handle)
        assert await handle.operation == 5  # nosec B101

    asyncio.run(scenario())

    assert store.get_state().value == 5  # nosec B101


def test_coroutine_outside_event_loop_is_rejected(kit, store):
    async def work() -> int:
        return 1

    coro = work()
    try:
        with pytest.raises(TrackingError) as info:
            kit.track(coro, store.dispatch)
    finally:
        coro.close()

    assert info.value.code is ErrorCode.UNSUPPORTED_OPERATION  # nosec B101
    assert store.messages == []  # nosec B101


def test_last_call_wins_with_futures(kit, store):
    async def scenario() -> None:
        track = kit.create_tracker(store.dispatch, ignore_superseded=True)
        first = track(_settle_later(0.02, 1))
        second = track(_settle_later(0.01, 2))
        await _drain(first, second)
        assert first.state is HandleState.CANCELED  # nosec B101

    asyncio.run(scenario())

    terminal = [(m.type, m.payload) for m in store.messages if m.type != "SET_PENDING"]
    assert terminal == [("RESOLVE", 2)]  # nosec B101
    assert store.get_state() == OperationState(fulfilled=True, value=2)  # nosec B101


def test_last_call_wins_with_failures(kit, store):
    stale = RuntimeError("E1")
    latest = RuntimeError("E2")

    async def scenario() -> None:
        track = kit.create_tracker(store.dispatch, ignore_superseded=True)
        first = track(_settle_later(0.02, error=stale))
        second = track(_settle_later(0.01, error=latest))
        await _drain(first, second)
        # suppressed failure is absorbed, the live one is re-signaled
        assert first.completion.exception() is None  # nosec B101
        assert second.completion.exception() is latest  # nosec B101

    asyncio.run(scenario())

    assert store.get_state() == OperationState(rejected=True, reason=latest)  # nosec B101


def test_overwrite_hazard_without_suppression(kit, store):
    async def scenario() -> None:
        track = kit.create_tracker(store.dispatch)
        handles = [track(_settle_later(0.02, 1)), track(_settle_later(0.01, 2))]
        await _drain(*handles)

    asyncio.run(scenario())

    assert [m.payload for m in store.messages if m.type == "RESOLVE"] == [2, 1]  # nosec B101
    assert store.get_state().value == 1  # nosec B101


def test_absorb_policy_resolves_completion():
    kit = create_operation_state(rejection_policy="absorb", settings=TrackingSettings())
    store = Store(kit.reducer)

    async def scenario() -> None:
        handle = kit.track(_settle_later(0.0, error=ValueError("x")), store.dispatch)
        await _drain(handle)
        assert handle.completion.result() is None  # nosec B101

    asyncio.run(scenario())

    assert kit.operation_tracker.rejection_policy is RejectionPolicy.ABSORB  # nosec B101
    assert store.get_state().rejected is True  # nosec B101


def test_cancelled_task_settles_as_rejection(kit, store):
    async def scenario() -> None:
        task = asyncio.ensure_future(asyncio.sleep(10))
        handle = kit.track(task, store.dispatch)
        task.cancel()
        await _drain(handle)
        assert handle.completion.cancelled()  # nosec B101

    asyncio.run(scenario())

    state = store.get_state()
    assert state.rejected and isinstance(state.reason, asyncio.CancelledError)  # nosec B101


def test_cancelling_handle_leaves_operation_running(kit, store):
    async def scenario() -> None:
        operation = _settle_later(0.01, "still computed")
        handle = kit.track(operation, store.dispatch)
        handle.cancel()
        await _drain(handle)
        assert operation.result() == "still computed"  # nosec B101

    asyncio.run(scenario())

    assert store.types() == ["SET_PENDING"]  # nosec B101


def test_sink_failing_on_pending_releases_scheduled_task(kit):
    started = []

    async def work() -> None:
        started.append(True)

    def broken_sink(message) -> None:
        raise RuntimeError("store offline")

    async def scenario() -> None:
        with pytest.raises(RuntimeError):
            kit.track(work(), broken_sink)
        owned = asyncio.get_running_loop().create_future()
        with pytest.raises(RuntimeError):
            kit.track(owned, broken_sink)
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert not owned.cancelled()  # nosec B101

    asyncio.run(scenario())

    assert started == []  # nosec B101
