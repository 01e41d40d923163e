"""Dispatch metrics adapter (Prometheus).

Uses a caller-supplied CollectorRegistry so the counters can be served
alongside the host application's own metrics.
"""

from prometheus_client import CollectorRegistry, Counter

from tracklane.core.protocols.metrics import DispatchMetrics


class PrometheusDispatchMetrics(DispatchMetrics):
    """Prometheus-backed dispatch metrics collection."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

        self._tracked_total = Counter(
            "tracklane_events_tracked_total",
            "Total events dispatched without provider failures",
            ["policy"],
            registry=self._registry,
        )

        self._failures_total = Counter(
            "tracklane_provider_failures_total",
            "Total failed deliveries, by provider",
            ["provider"],
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    # -- DispatchMetrics protocol methods --

    def inc_tracked(self, policy: str) -> None:
        self._tracked_total.labels(policy=policy).inc()

    def inc_failure(self, provider: str) -> None:
        self._failures_total.labels(provider=provider).inc()
