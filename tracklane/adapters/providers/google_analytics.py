"""Google Analytics provider binding."""

from typing import Protocol

from tracklane.adapters.providers.errors import provider_call
from tracklane.core.config.enums import ProviderId
from tracklane.core.events import Event


class GoogleAnalyticsClient(Protocol):
    """Native Google Analytics call shape."""

    def log(self, event: str, payload: str) -> None: ...


class GoogleAnalyticsBinding:
    """Translates ``emit(event)`` into ``client.log(event, payload)``."""

    name = ProviderId.GOOGLE_ANALYTICS.value

    def __init__(self, client: GoogleAnalyticsClient) -> None:
        """Bind to a Google Analytics client."""
        self._client = client

    def emit(self, event: Event) -> None:
        """Forward the event to Google Analytics."""
        with provider_call(self.name):
            self._client.log(event.name, event.payload)
