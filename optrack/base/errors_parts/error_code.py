"""
Normalized tracking error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the tracker, its settlement
adapters and the structured logging layer. Values are lowercase snake_case and
are considered a stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    OPERATION_FAILED = "operation_failed"
    CANCELLED = "cancelled"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
