"""Abstract settlement adapter (single-class module).

A settlement adapter turns one family of asynchronous primitives into the
two-continuation capability the tracker needs. Continuations follow promise
semantics: the value a continuation returns settles the chain successfully,
an exception it raises leaves the chain failed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

Continuation = Callable[[Any], Any]


class SettlementAdapter(ABC):
    """Attach success / failure continuations to a supported operation."""

    name: str = "abstract"

    @abstractmethod
    def accepts(self, operation: Any) -> bool:
        """Return True if this adapter can attach to ``operation``."""

    def prepare(self, operation: Any) -> Any:
        """Normalize ``operation`` before the pending emission.

        Must not allow the operation to settle observably; errors raised here
        abort tracking before anything is emitted.
        """
        return operation

    def release(self, source: Any, operation: Any) -> None:
        """Undo ``prepare`` when tracking is abandoned before continuations attach.

        ``source`` is the object handed to ``prepare`` and ``operation`` what it
        returned. Caller-owned operations must be left running.
        """

    @abstractmethod
    def attach(self, operation: Any, on_success: Continuation, on_failure: Continuation) -> Any:
        """Register continuations and return the continuation chain."""


__all__ = ["SettlementAdapter", "Continuation"]
