"""DTO package for the tracking layer."""

from .message import Message
from .operation_state import OperationState, Status
from .rejection_policy import RejectionPolicy
from .tracking_settings import TrackingSettings

__all__ = [
    "Message",
    "OperationState",
    "Status",
    "RejectionPolicy",
    "TrackingSettings",
]
