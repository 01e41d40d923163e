"""Dispatch metrics protocol.

Implementations: PrometheusDispatchMetrics (production) and
FakeDispatchMetrics (tests), both in tracklane.adapters.metrics.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DispatchMetrics(Protocol):
    """Counters recorded by the Dispatcher."""

    def inc_tracked(self, policy: str) -> None:
        """Count one event fully dispatched by a policy of the given kind."""
        ...

    def inc_failure(self, provider: str) -> None:
        """Count one failed delivery to ``provider``."""
        ...
