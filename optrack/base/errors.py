"""Unified tracking error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``optrack.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.tracking_error import TrackingError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "TrackingError", "classify_exception"]
