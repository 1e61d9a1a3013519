"""The construction facade wires one set of action types through every part."""
from __future__ import annotations

import pytest

from optrack import (
    REJECT,
    RESOLVE,
    SET_PENDING,
    OperationState,
    RejectionPolicy,
    TrackingError,
    create_operation_state,
)
from optrack.base.dto import TrackingSettings
from optrack.base.errors import ErrorCode
from optrack.tests.utils import ManualOperation, Store


def test_default_kit_exposes_canonical_types(kit):
    assert (kit.SET_PENDING, kit.RESOLVE, kit.REJECT) == (SET_PENDING, RESOLVE, REJECT)  # nosec B101
    assert kit.types is kit.actions.types  # nosec B101
    assert kit.operation_tracker.rejection_policy is RejectionPolicy.RETHROW  # nosec B101


def test_customized_kit_end_to_end(clean_env):
    kit = create_operation_state(lambda t: f"users/{t}", settings=TrackingSettings())
    store = Store(kit.reducer)
    op = ManualOperation()

    kit.create_tracker(store.dispatch)(op)
    op.resolve(["ada"])

    assert store.types() == ["users/SET_PENDING", "users/RESOLVE"]  # nosec B101
    assert store.get_state() == OperationState(fulfilled=True, value=["ada"])  # nosec B101
    assert kit.pending_message().type == kit.SET_PENDING == "users/SET_PENDING"  # nosec B101
    assert kit.rejected_message("x").error is True  # nosec B101


def test_two_kits_share_a_store_without_interference(clean_env):
    users = create_operation_state(lambda t: f"users/{t}", settings=TrackingSettings())
    orders = create_operation_state(lambda t: f"orders/{t}", settings=TrackingSettings())
    state = {"users": None, "orders": None}

    def dispatch(message):
        state["users"] = users.reducer(state["users"], message)
        state["orders"] = orders.reducer(state["orders"], message)

    users.track(ManualOperation(), dispatch)

    assert state["users"] == OperationState(pending=True)  # nosec B101
    assert state["orders"] == OperationState()  # nosec B101


def test_settings_default_for_ignore_superseded(clean_env):
    kit = create_operation_state(settings=TrackingSettings(ignore_superseded=True))
    store = Store(kit.reducer)

    track = kit.create_tracker(store.dispatch)
    first = track(ManualOperation())
    track(ManualOperation())

    assert track.ignore_superseded is True and first.cancelled  # nosec B101
    assert kit.create_tracker(store.dispatch, ignore_superseded=False).ignore_superseded is False  # nosec B101


def test_kit_reads_environment_when_settings_omitted(clean_env, monkeypatch):
    monkeypatch.setenv("OPTRACK_REJECTION_POLICY", "ABSORB")

    kit = create_operation_state()

    assert kit.operation_tracker.rejection_policy is RejectionPolicy.ABSORB  # nosec B101


def test_explicit_policy_overrides_settings(clean_env):
    kit = create_operation_state(rejection_policy=RejectionPolicy.ABSORB, settings=TrackingSettings())
    assert kit.operation_tracker.rejection_policy is RejectionPolicy.ABSORB  # nosec B101


def test_bound_tracker_requires_dispatchers(kit):
    with pytest.raises(TrackingError) as info:
        kit.create_bound_tracker(None)  # type: ignore[arg-type]
    assert info.value.code is ErrorCode.CONFIGURATION  # nosec B101


def test_kit_bound_tracker_delivers(kit, store):
    op = ManualOperation()
    kit.create_bound_tracker(kit.bind(store.dispatch), ignore_superseded=True)(op)
    op.resolve(3)

    assert store.get_state().value == 3  # nosec B101
