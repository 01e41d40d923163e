"""PostHog provider binding."""

from typing import Any, Dict, Optional, Protocol

from tracklane.adapters.providers.errors import provider_call
from tracklane.core.config.enums import ProviderId
from tracklane.core.events import Event
from tracklane.core.logging import logger


class PostHogClient(Protocol):
    """Subset of ``posthog.Posthog`` the binding calls."""

    def capture(self, *args: Any, **kwargs: Any) -> Any: ...


class PostHogBinding:
    """Wraps a PostHog client behind the Emitter protocol.

    PostHog has no notion of an opaque payload, so the payload string is
    sent as the ``payload`` property and every event is attributed to a
    fixed ``distinct_id``. Enriches every event with the deployment
    environment so dashboards can segment by it.
    """

    name = ProviderId.POSTHOG.value

    def __init__(
        self,
        client: PostHogClient,
        distinct_id: str,
        environment: Optional[str] = None,
    ) -> None:
        """Bind to a configured PostHog client."""
        self._client = client
        self._distinct_id = distinct_id
        self._environment = environment
        logger.info("PostHog binding initialized (env=%s)", environment)

    def _properties(self, event: Event) -> Dict[str, Any]:
        properties: Dict[str, Any] = {"payload": event.payload}
        if self._environment:
            properties["environment"] = self._environment
        return properties

    def emit(self, event: Event) -> None:
        """Capture the event in PostHog."""
        with provider_call(self.name):
            self._client.capture(
                distinct_id=self._distinct_id,
                event=event.name,
                properties=self._properties(event),
            )
