"""Mixpanel provider binding."""

from typing import Protocol

from tracklane.adapters.providers.errors import provider_call
from tracklane.core.config.enums import ProviderId
from tracklane.core.events import Event


class MixpanelClient(Protocol):
    """Native Mixpanel call shape."""

    def send(self, event: str, payload: str) -> None: ...


class MixpanelBinding:
    """Translates ``emit(event)`` into ``client.send(event, payload)``."""

    name = ProviderId.MIXPANEL.value

    def __init__(self, client: MixpanelClient) -> None:
        self._client = client

    def emit(self, event: Event) -> None:
        with provider_call(self.name):
            self._client.send(event.name, event.payload)
