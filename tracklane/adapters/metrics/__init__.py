"""Dispatch metrics adapters (Prometheus + Fake)."""

from tracklane.adapters.metrics.fake import FakeDispatchMetrics
from tracklane.adapters.metrics.prometheus import PrometheusDispatchMetrics

__all__ = ["FakeDispatchMetrics", "PrometheusDispatchMetrics"]
