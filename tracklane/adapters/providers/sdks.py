"""Console SDK clients.

Stand-ins for the Google Analytics, Mixpanel and internal analytics SDKs.
Each exposes the backend's own method name and writes one log line per
call instead of talking to the network. The container wires them in
every environment; swap in a real client by passing it to the binding.
"""

import logging

logger = logging.getLogger(__name__)


class GoogleAnalyticsSdk:
    """Console client with the Google Analytics ``log(event, payload)`` shape."""

    def log(self, event: str, payload: str) -> None:
        logger.info("[GA SDK] %s -> %s", event, payload)


class MixpanelSdk:
    """Console client with the Mixpanel ``send(event, payload)`` shape."""

    def send(self, event: str, payload: str) -> None:
        logger.info("[Mixpanel SDK] %s -> %s", event, payload)


class InternalAnalyticsSdk:
    """Console client with the internal pipeline's ``push(event, payload)`` shape."""

    def push(self, event: str, payload: str) -> None:
        logger.info("[Internal SDK] %s -> %s", event, payload)
