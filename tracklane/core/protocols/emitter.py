"""Emitter protocol.

Defines the structural typing contract shared by Provider Bindings and
Behavior Wrappers. Uses :class:`typing.Protocol` so implementations don't
need to inherit.

Usage::

    from tracklane.core.protocols import Emitter


    def install(target: Emitter) -> ...:
        target.emit(Event(name="UserSignup", payload="{userId:42}"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tracklane.core.events import Event


@runtime_checkable
class Emitter(Protocol):
    """Anything that accepts an Event and causes an external side effect."""

    @property
    def name(self) -> str:
        """Backend this emitter ultimately delivers to (e.g. 'mixpanel').

        Used to identify failures in aggregate errors and metrics.
        """
        ...

    def emit(self, event: "Event") -> None:
        """Deliver the event.

        Raises:
            ProviderError: If the backend call fails.
        """
        ...
