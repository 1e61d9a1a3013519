"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `optrack.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .tracking_error import TrackingError
from .classification import classify_exception

__all__ = ["ErrorCode", "TrackingError", "classify_exception"]
