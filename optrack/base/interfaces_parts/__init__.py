"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``optrack.base.interfaces`` to re-export a stable API.
"""

from .sink import Sink
from .settleable import Settleable
from .bound_dispatcher import BoundDispatcher

__all__ = ["Sink", "Settleable", "BoundDispatcher"]
