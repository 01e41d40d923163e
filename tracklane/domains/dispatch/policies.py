"""Dispatch policies.

A policy decides which emitters receive an event. Policies are immutable
once built: changing the set of targets means constructing a new policy
and installing it on the Dispatcher.

Usage::

    policy = BroadcastPolicy(
        [LoggingEmitter(GoogleAnalyticsBinding(ga)), MixpanelBinding(mp)],
    )
    policy.send(Event(name="UserSignup", payload="{userId:42}"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from tracklane.core.config.enums import FailureMode, PolicyKind
from tracklane.core.exceptions import BroadcastError, ConfigurationError, ProviderError
from tracklane.core.logging import logger

if TYPE_CHECKING:
    from tracklane.core.events import Event
    from tracklane.core.protocols import Emitter


def _as_provider_error(target: "Emitter", exc: Exception) -> ProviderError:
    """Return ``exc`` if it already names a provider, else wrap it."""
    if isinstance(exc, ProviderError):
        return exc
    name = getattr(target, "name", type(target).__name__)
    error = ProviderError(name, str(exc) or type(exc).__name__)
    error.__cause__ = exc
    return error


class SinglePolicy:
    """Pass-through to exactly one emitter."""

    kind = PolicyKind.SINGLE.value

    def __init__(self, target: Optional["Emitter"]) -> None:
        """Initialize the policy.

        Raises:
            ConfigurationError: If ``target`` is None.
        """
        if target is None:
            raise ConfigurationError("SinglePolicy requires a target emitter")
        self._target = target

    @property
    def target(self) -> "Emitter":
        return self._target

    def send(self, event: "Event") -> None:
        """Emit the event to the target exactly once."""
        try:
            self._target.emit(event)
        except Exception as exc:
            error = _as_provider_error(self._target, exc)
            if error is exc:
                raise
            raise error from exc


class BroadcastPolicy:
    """Fans one event out to a fixed, ordered set of emitters.

    Targets run sequentially in registration order and all receive the
    same immutable Event. Duplicated targets are invoked once per entry.

    With ``FailureMode.BEST_EFFORT`` (default) every target is attempted
    and failures are reported together as a ``BroadcastError`` once the
    loop finishes. With ``FailureMode.FAIL_FAST`` the first failure is
    raised immediately and the remaining targets are skipped.
    """

    kind = PolicyKind.BROADCAST.value

    def __init__(
        self,
        targets: Sequence["Emitter"],
        failure_mode: FailureMode = FailureMode.BEST_EFFORT,
    ) -> None:
        """Initialize the policy.

        Args:
            targets: Emitters in delivery order. Copied; later changes to
                the caller's sequence have no effect.
            failure_mode: How to handle a failing target.

        Raises:
            ConfigurationError: If ``targets`` is empty or contains None, or
                ``failure_mode`` is not a known FailureMode.
        """
        if not targets:
            raise ConfigurationError("BroadcastPolicy requires at least one target emitter")
        if any(t is None for t in targets):
            raise ConfigurationError("BroadcastPolicy targets must not be None")
        self._targets: Tuple["Emitter", ...] = tuple(targets)
        try:
            self._failure_mode = FailureMode(failure_mode)
        except ValueError:
            raise ConfigurationError(f"Unknown broadcast failure mode: '{failure_mode}'") from None

    @property
    def targets(self) -> Tuple["Emitter", ...]:
        return self._targets

    @property
    def failure_mode(self) -> FailureMode:
        return self._failure_mode

    def send(self, event: "Event") -> None:
        """Emit the event to every target in order.

        Raises:
            ProviderError: First failure, in fail-fast mode.
            BroadcastError: All failures, in best-effort mode.
        """
        errors: List[ProviderError] = []
        for target in self._targets:
            try:
                target.emit(event)
            except Exception as exc:
                error = _as_provider_error(target, exc)
                if self._failure_mode == FailureMode.FAIL_FAST:
                    if error is exc:
                        raise
                    raise error from exc
                logger.warning(
                    f"[Broadcast] '{error.provider}' failed for '{event.name}' ({error.message}), "
                    "continuing with remaining targets"
                )
                errors.append(error)

        if errors:
            raise BroadcastError(errors)
