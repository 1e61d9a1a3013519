"""Handle state machine parts (one class per module)."""

from .handle_state import HandleState
from .tracking_handle import TrackingHandle

__all__ = ["HandleState", "TrackingHandle"]
