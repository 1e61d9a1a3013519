"""
Collaborator interfaces (Protocols) for the tracking layer.

Re-exports Protocols split into single-class modules under
``optrack.base.interfaces_parts`` so upstream imports stay stable.
"""

from __future__ import annotations

from .interfaces_parts import BoundDispatcher, Settleable, Sink

__all__ = ["Sink", "Settleable", "BoundDispatcher"]
