"""
Error classification helpers mapping failure reasons to ErrorCode values.

Used when a tracked operation settles with a failure so that the structured
log line for the rejected emission carries a normalized ``error_code``.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Any

from .error_code import ErrorCode
from .tracking_error import TrackingError


def classify_exception(exc: Any) -> ErrorCode:
    """Classify a failure reason into a normalized :class:`ErrorCode`.

    Precedence:
        1. TrackingError passthrough.
        2. Cancellation of the underlying operation (asyncio / futures).
        3. Timeout exceptions (sync/async).
        4. Any other exception → ``OPERATION_FAILED``.
        5. Non-exception reasons → ``UNKNOWN``.
    """
    if isinstance(exc, TrackingError):
        return exc.code
    if isinstance(exc, (asyncio.CancelledError, concurrent.futures.CancelledError)):
        return ErrorCode.CANCELLED
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, concurrent.futures.TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, BaseException):
        return ErrorCode.OPERATION_FAILED
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
