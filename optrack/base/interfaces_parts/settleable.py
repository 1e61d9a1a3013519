"""Settleable Protocol (single-class module).

The minimal asynchronous-operation capability the tracker relies on: register
one continuation for success and one for failure. Promise-style objects expose
it directly; ``asyncio`` and ``concurrent.futures`` futures are adapted to it
by ``optrack.base.settlement``.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Settleable(Protocol):
    """Two-continuation settlement registration (a "thenable").

    ``then`` returns the continuation chain. A continuation that raises leaves
    the returned chain failed with that exception.
    """

    def then(
        self,
        on_success: Callable[[Any], Any],
        on_failure: Callable[[Any], Any],
    ) -> Any:  # pragma: no cover - interface
        ...
