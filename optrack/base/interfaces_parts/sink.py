"""Sink Protocol (single-class module).

A sink is any callable accepting one ``Message`` and applying it to externally
owned state, typically a host state container's ``dispatch``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..dto import Message


@runtime_checkable
class Sink(Protocol):
    """Callable receiving every message a tracker emits."""

    def __call__(self, message: Message) -> Any:  # pragma: no cover - interface
        ...
