"""Validated tracking configuration produced by ``optrack.config``.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and coercion of env/file values
  (``"true"``/``"0"`` strings become booleans, policy names become enums).
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .rejection_policy import RejectionPolicy


class TrackingSettings(BaseModel):
    """Defaults applied by the construction facade when callers omit them.

    Attributes
    ----------
    ignore_superseded:
        Default for ``create_tracker(..., ignore_superseded=...)``.
    rejection_policy:
        Failure-path policy of the kit's ``OperationTracker``.
    log_events:
        Whether trackers emit structured ``track.*`` log events.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    ignore_superseded: bool = False
    rejection_policy: RejectionPolicy = RejectionPolicy.RETHROW
    log_events: bool = True


__all__ = ["TrackingSettings"]
