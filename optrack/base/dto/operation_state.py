"""Externally stored lifecycle state of a single asynchronous operation.

Purpose
-------
``OperationState`` is the value the reducer produces and a host state
container stores. It is frozen; every transition builds a new instance.

Failure modes & side effects
----------------------------
- Construction validates the lifecycle invariants and raises
  ``pydantic.ValidationError`` when they are violated:
  * at most one of ``pending`` / ``fulfilled`` / ``rejected`` is truthy;
  * ``value`` is non-null only when fulfilled;
  * ``reason`` is non-null only when rejected.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

Status = Literal["idle", "pending", "fulfilled", "rejected"]


class OperationState(BaseModel):
    """Lifecycle flags plus the settled value or failure reason."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # carries the pending payload verbatim; only its truthiness is checked
    pending: Any = False
    fulfilled: bool = False
    rejected: bool = False
    value: Any = None
    reason: Any = None

    @model_validator(mode="after")
    def _check_lifecycle(self) -> "OperationState":
        if sum(bool(flag) for flag in (self.pending, self.fulfilled, self.rejected)) > 1:
            raise ValueError("at most one of pending, fulfilled, rejected may be true")
        if self.value is not None and not self.fulfilled:
            raise ValueError("value is only allowed on a fulfilled state")
        if self.reason is not None and not self.rejected:
            raise ValueError("reason is only allowed on a rejected state")
        return self

    @property
    def status(self) -> Status:
        """Collapse the flags into a single lifecycle label."""
        if self.pending:
            return "pending"
        if self.fulfilled:
            return "fulfilled"
        if self.rejected:
            return "rejected"
        return "idle"

    @property
    def settled(self) -> bool:
        return self.fulfilled or self.rejected


__all__ = ["OperationState", "Status"]
