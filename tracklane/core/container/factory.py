"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the tracking pipeline: provider bindings, their wrappers, the dispatch
policy and the Dispatcher.

Design principles:
- Single place for all wiring decisions
- Fail fast: broken wiring crashes at startup, not on the first track call
- Testable: can unit test factory logic with mock settings
"""

from typing import List, Optional

from prometheus_client import CollectorRegistry

from tracklane.adapters.metrics import PrometheusDispatchMetrics
from tracklane.adapters.providers.registry import create_provider, resolve_provider_id
from tracklane.adapters.wrappers import BufferingEmitter, LoggingEmitter
from tracklane.core.config import Settings
from tracklane.core.config.enums import PolicyKind
from tracklane.core.container.container import Container
from tracklane.core.exceptions import ConfigurationError
from tracklane.core.logging import logger
from tracklane.core.protocols import DispatchMetrics, Emitter
from tracklane.domains.dispatch import BroadcastPolicy, Dispatcher, SinglePolicy


def create_container(
    settings: Settings, registry: Optional[CollectorRegistry] = None
) -> Container:
    """Build the container from settings.

    Args:
        settings: Application settings (from core/config).
        registry: Prometheus registry for dispatch metrics. A private
            registry is created when omitted.

    Returns:
        Fully constructed Container ready for use.

    Raises:
        UnknownProviderError: If a configured provider id is unknown.
        ConfigurationError: If the provider configuration is incomplete.
    """
    metrics = _create_metrics(settings, registry)
    policy = _create_policy(settings)
    dispatcher = Dispatcher(policy=policy, metrics=metrics)
    return Container(dispatcher=dispatcher, metrics=metrics)


# ---------------------------------------------------------------------------
# Private factory functions for each dependency
# ---------------------------------------------------------------------------


def _create_metrics(
    settings: Settings, registry: Optional[CollectorRegistry]
) -> Optional[DispatchMetrics]:
    if not settings.METRICS_ENABLED:
        return None
    return PrometheusDispatchMetrics(registry=registry)


def _create_emitters(settings: Settings) -> List[Emitter]:
    """Build one emitter chain per configured provider, in order.

    Buffering wraps the binding first, so when a provider is both logged
    and buffered the log line is written before the event is buffered.
    """
    logged = {resolve_provider_id(p) for p in settings.logged_providers}
    buffered = {resolve_provider_id(p) for p in settings.buffered_providers}

    emitters: List[Emitter] = []
    for raw_id in settings.tracking_providers:
        provider_id = resolve_provider_id(raw_id)
        emitter = create_provider(provider_id, settings)
        if provider_id in buffered:
            emitter = BufferingEmitter(emitter, capacity=settings.TRACKING_BUFFER_SIZE)
        if provider_id in logged:
            emitter = LoggingEmitter(emitter)
        emitters.append(emitter)

    unused = (logged | buffered) - {resolve_provider_id(p) for p in settings.tracking_providers}
    if unused:
        logger.warning(
            "Wrapper settings reference providers that receive no events: %s",
            ", ".join(sorted(p.value for p in unused)),
        )
    return emitters


def _create_policy(settings: Settings) -> SinglePolicy | BroadcastPolicy:
    emitters = _create_emitters(settings)
    if settings.TRACKING_POLICY == PolicyKind.SINGLE:
        if len(emitters) != 1:
            raise ConfigurationError(
                f"Single policy needs exactly one provider, got {len(emitters)}"
            )
        policy: SinglePolicy | BroadcastPolicy = SinglePolicy(emitters[0])
    else:
        policy = BroadcastPolicy(emitters, failure_mode=settings.TRACKING_FAILURE_MODE)

    logger.info(
        "Tracking pipeline built: policy=%s providers=%s",
        policy.kind,
        ",".join(e.name for e in emitters),
    )
    return policy
