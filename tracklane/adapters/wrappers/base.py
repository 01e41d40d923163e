"""Behavior wrapper base.

A wrapper owns exactly one inner Emitter, runs its own action, then
always delegates. Stacking wrappers runs the outermost action first and
the provider binding's side effect last.
"""

from abc import ABC, abstractmethod

from tracklane.core.events import Event
from tracklane.core.logging import logger
from tracklane.core.protocols import Emitter


class EmitterWrapper(ABC):
    """Emitter that adds a side action before delegating.

    A failing action is logged and ignored; it never stops delivery.
    Errors raised by the wrapped emitter propagate unchanged.
    """

    def __init__(self, wrapped: Emitter) -> None:
        """Take ownership of the emitter to delegate to."""
        self._wrapped = wrapped

    @property
    def wrapped(self) -> Emitter:
        """The emitter this wrapper delegates to."""
        return self._wrapped

    @property
    def name(self) -> str:
        """Name of the backend at the end of the chain."""
        return self._wrapped.name

    @abstractmethod
    def _before_emit(self, event: Event) -> None:
        """Wrapper-specific action, run before delegation."""

    def emit(self, event: Event) -> None:
        """Run the action, then hand the event to the wrapped emitter."""
        try:
            self._before_emit(event)
        except Exception as e:
            logger.warning(
                "%s action failed for '%s' (delivery continues): %s",
                type(self).__name__,
                event.name,
                e,
            )
        self._wrapped.emit(event)
