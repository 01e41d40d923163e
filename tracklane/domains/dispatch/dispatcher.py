"""Dispatcher: the single entry point client code tracks events through."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Optional

from pydantic import ValidationError

from tracklane.core.events import Event
from tracklane.core.exceptions import (
    BroadcastError,
    ConfigurationError,
    InvalidEventError,
    ProviderError,
)
from tracklane.core.logging import logger

if TYPE_CHECKING:
    from tracklane.core.protocols import DispatchMetrics
    from tracklane.domains.dispatch.protocols import DispatchPolicy


def _policy_kind(policy: "DispatchPolicy") -> str:
    """Metrics label for a policy; caller-written policies may not define ``kind``."""
    return getattr(policy, "kind", type(policy).__name__)


class Dispatcher:
    """Holds the active dispatch policy and forwards tracked events to it.

    The policy slot is the only mutable state. Writers replace it under a
    lock; ``track`` reads a snapshot under the same lock and dispatches
    outside it, so a concurrent ``set_policy`` never affects a call that
    has already taken its snapshot.

    Usage:
        dispatcher = Dispatcher()
        dispatcher.set_policy(BroadcastPolicy([ga, mixpanel]))
        dispatcher.track("UserSignup", "{userId:42}")
    """

    def __init__(
        self,
        policy: Optional["DispatchPolicy"] = None,
        metrics: Optional["DispatchMetrics"] = None,
    ) -> None:
        """Initialize the dispatcher, optionally with a policy already installed."""
        self._lock = threading.Lock()
        self._policy = policy
        self._metrics = metrics

    @property
    def policy(self) -> Optional["DispatchPolicy"]:
        """Currently installed policy, or None."""
        with self._lock:
            return self._policy

    def set_policy(self, policy: "DispatchPolicy") -> None:
        """Replace the active policy for all subsequent ``track`` calls.

        Raises:
            ConfigurationError: If ``policy`` is None.
        """
        if policy is None:
            raise ConfigurationError("Cannot install an empty dispatch policy")
        with self._lock:
            self._policy = policy
        logger.info(f"Dispatch policy set to '{_policy_kind(policy)}'")

    def track(self, name: str, payload: str) -> None:
        """Build an Event and send it through the active policy.

        Returns once every emitter the policy resolves has finished.

        Raises:
            ConfigurationError: If no policy is installed.
            InvalidEventError: If ``name`` is empty or not a string.
            ProviderError: If a single-target or fail-fast delivery fails.
            BroadcastError: If a best-effort broadcast had failures.
        """
        with self._lock:
            policy = self._policy

        if policy is None:
            raise ConfigurationError("No dispatch policy installed; call set_policy() first")

        try:
            event = Event(name=name, payload=payload)
        except ValidationError as e:
            raise InvalidEventError(f"Invalid event '{name}': {e.errors()[0]['msg']}") from e

        try:
            policy.send(event)
        except BroadcastError as e:
            for error in e.errors:
                self._record_failure(error.provider)
            raise
        except ProviderError as e:
            self._record_failure(e.provider)
            raise

        if self._metrics is not None:
            self._metrics.inc_tracked(_policy_kind(policy))

    def _record_failure(self, provider: str) -> None:
        if self._metrics is not None:
            self._metrics.inc_failure(provider)
