"""Protocols for the dispatch domain."""

from typing import Optional, Protocol, runtime_checkable

from tracklane.core.events import Event


@runtime_checkable
class DispatchPolicy(Protocol):
    """Maps one Event to one or more Emitter invocations.

    Built-in policies also expose a ``kind`` label (``single`` or
    ``broadcast``) used for metrics. It is optional: the Dispatcher falls
    back to the class name for policies that do not define it.
    """

    def send(self, event: Event) -> None:
        """Deliver the event to the policy's target(s).

        Raises:
            ProviderError: A target failed (single target or fail-fast).
            BroadcastError: One or more targets failed (best-effort).
        """
        ...


class DispatcherProtocol(Protocol):
    """Public entry point for client code."""

    @property
    def policy(self) -> Optional[DispatchPolicy]:
        """Currently installed policy, if any."""
        ...

    def set_policy(self, policy: DispatchPolicy) -> None:
        """Install ``policy`` for all subsequent track calls."""
        ...

    def track(self, name: str, payload: str) -> None:
        """Build an Event and dispatch it through the active policy."""
        ...
