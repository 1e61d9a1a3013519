"""Pytest configuration for the optrack test suite.

Fixtures
--------
- ``clock``: deterministic fake timer wheel (milliseconds) driving
  ``ManualOperation`` settlements, so scenario tests reproduce exact
  settlement orders without sleeping.
- ``kit`` / ``store``: an ``OperationStateKit`` with default types and a
  minimal state container whose ``dispatch`` is the sink.
- ``clean_env``: strips ``OPTRACK_*`` variables and the config file cache.
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from optrack import create_operation_state
from optrack.base.dto import TrackingSettings
from optrack.config import reset_config_cache
from optrack.config.env import ENV_PREFIX
from optrack.tests.utils import FakeClock, Store


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove OPTRACK_* variables and cached config files for the test."""

    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def kit(clean_env):
    return create_operation_state(settings=TrackingSettings())


@pytest.fixture()
def store(kit) -> Store:
    return Store(kit.reducer)
