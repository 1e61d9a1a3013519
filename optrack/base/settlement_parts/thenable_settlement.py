"""Settlement adapter for promise-style objects exposing ``then``."""
from __future__ import annotations

from typing import Any

from ..interfaces import Settleable
from .settlement_adapter import Continuation, SettlementAdapter


class ThenableSettlement(SettlementAdapter):
    """Delegate straight to ``operation.then(on_success, on_failure)``."""

    name = "thenable"

    def accepts(self, operation: Any) -> bool:
        return isinstance(operation, Settleable)

    def attach(self, operation: Any, on_success: Continuation, on_failure: Continuation) -> Any:
        return operation.then(on_success, on_failure)


__all__ = ["ThenableSettlement"]
