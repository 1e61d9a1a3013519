"""Settlement adapter registry (public API facade).

Purpose
-------
Resolve which ``SettlementAdapter`` handles a given operation. Lookup walks
an ordered tuple and picks the first adapter that accepts the operation:

1. ``asyncio`` futures and tasks
2. ``concurrent.futures.Future``
3. thenables (``then(on_success, on_failure)``)
4. any other awaitable (scheduled on the running loop)

Failure modes
-------------
``resolve_adapter`` raises ``TrackingError(UNSUPPORTED_OPERATION)`` when no
adapter accepts the operation.
"""
from __future__ import annotations

from typing import Any, Sequence, Tuple

from .errors import ErrorCode, TrackingError
from .settlement_parts import (
    AsyncioSettlement,
    Continuation,
    FutureSettlement,
    SettlementAdapter,
    ThenableSettlement,
)


DEFAULT_ADAPTERS: Tuple[SettlementAdapter, ...] = (
    AsyncioSettlement(awaitables=False),
    FutureSettlement(),
    ThenableSettlement(),
    AsyncioSettlement(),
)


def resolve_adapter(operation: Any, adapters: Sequence[SettlementAdapter] = DEFAULT_ADAPTERS) -> SettlementAdapter:
    """Return the first adapter accepting ``operation``."""
    for adapter in adapters:
        if adapter.accepts(operation):
            return adapter
    raise TrackingError(
        ErrorCode.UNSUPPORTED_OPERATION,
        f"cannot track {type(operation).__name__!r}: expected a future, a thenable or an awaitable",
    )


__all__ = [
    "SettlementAdapter",
    "Continuation",
    "AsyncioSettlement",
    "FutureSettlement",
    "ThenableSettlement",
    "DEFAULT_ADAPTERS",
    "resolve_adapter",
]
