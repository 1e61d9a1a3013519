"""Settlement adapters split into single-class modules."""

from .settlement_adapter import Continuation, SettlementAdapter
from .asyncio_settlement import AsyncioSettlement
from .future_settlement import FutureSettlement
from .thenable_settlement import ThenableSettlement

__all__ = [
    "Continuation",
    "SettlementAdapter",
    "AsyncioSettlement",
    "FutureSettlement",
    "ThenableSettlement",
]
