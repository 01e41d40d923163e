"""Internal analytics pipeline binding."""

from typing import Protocol

from tracklane.adapters.providers.errors import provider_call
from tracklane.core.config.enums import ProviderId
from tracklane.core.events import Event


class InternalAnalyticsClient(Protocol):
    """Native internal pipeline call shape."""

    def push(self, event: str, payload: str) -> None: ...


class InternalAnalyticsBinding:
    """Translates ``emit(event)`` into ``client.push(event, payload)``."""

    name = ProviderId.INTERNAL.value

    def __init__(self, client: InternalAnalyticsClient) -> None:
        """Bind to the internal pipeline client."""
        self._client = client

    def emit(self, event: Event) -> None:
        """Push the event onto the internal pipeline."""
        with provider_call(self.name):
            self._client.push(event.name, event.payload)
