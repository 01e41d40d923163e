"""Logging wrapper."""

import logging
from typing import Optional, Union

from tracklane.adapters.wrappers.base import EmitterWrapper
from tracklane.core.events import Event
from tracklane.core.logging import ContextualLogger, logger
from tracklane.core.protocols import Emitter


class LoggingEmitter(EmitterWrapper):
    """Records that an event is about to be dispatched, then delegates.

    Usage:
        emitter = LoggingEmitter(GoogleAnalyticsBinding(GoogleAnalyticsSdk()))
        emitter.emit(Event(name="UserSignup", payload="{userId:42}"))
        # [LOG] Tracking event: UserSignup [provider=google_analytics]
    """

    def __init__(
        self,
        wrapped: Emitter,
        log: Optional[Union[ContextualLogger, logging.Logger]] = None,
    ) -> None:
        """Wrap ``wrapped``; ``log`` defaults to the package logger bound to the provider."""
        super().__init__(wrapped)
        self._log = log if log is not None else logger.with_context(provider=wrapped.name)

    def _before_emit(self, event: Event) -> None:
        self._log.info("[LOG] Tracking event: %s", event.name)
