"""Immutable action message consumed by the operation-state reducer.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` (frozen) for immutability and `.model_dump()`.

Notes
-----
``payload`` is intentionally untyped: it carries the pending flag, the
operation's value, or its failure reason (usually an exception instance).
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """A state-transition event: ``{type, payload, error}``.

    Attributes
    ----------
    type:
        One of the three resolved action types of an ``ActionFactory`` (or any
        other string for messages the reducer ignores).
    payload:
        Pending flag, resolved value, or rejection reason.
    error:
        ``True`` only for rejection messages.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str
    payload: Any = None
    error: bool = False


__all__ = ["Message"]
