"""Core protocols for dependency injection.

Domain-specific protocols (dispatch policies, dispatcher) live in their
domain directory. This module keeps cross-cutting contracts only.
"""

from tracklane.core.protocols.emitter import Emitter
from tracklane.core.protocols.metrics import DispatchMetrics

__all__ = [
    "DispatchMetrics",
    "Emitter",
]
