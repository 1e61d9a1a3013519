"""
Structured tracking error exception type.

Raised for misconfiguration (missing sink, missing action factory) and for
operations the settlement layer cannot attach to. Operation failures are never
wrapped in this type; they travel as the payload of rejected messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class TrackingError(Exception):
    """Represents a structured tracking error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        tracker: Optional tracker name where the error originated.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    tracker: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining tracker, code, and message."""
        return f"{self.tracker or '-'} {self.code.value}: {self.message}"


__all__ = ["TrackingError"]
