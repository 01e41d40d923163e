"""tracklane: pluggable event-tracking dispatcher.

Client code tracks named events through a Dispatcher; the installed
dispatch policy routes each event to one or more provider bindings,
optionally through logging and buffering wrappers.
"""

from tracklane.adapters.providers import (
    GoogleAnalyticsBinding,
    InternalAnalyticsBinding,
    MixpanelBinding,
    PostHogBinding,
    create_provider,
)
from tracklane.adapters.wrappers import BufferingEmitter, LoggingEmitter
from tracklane.core.config.enums import FailureMode, PolicyKind, ProviderId
from tracklane.core.events import Event
from tracklane.core.exceptions import (
    BroadcastError,
    ConfigurationError,
    InvalidEventError,
    ProviderError,
    TrackingException,
    UnknownProviderError,
)
from tracklane.domains.dispatch import BroadcastPolicy, Dispatcher, SinglePolicy

__all__ = [
    "BroadcastError",
    "BroadcastPolicy",
    "BufferingEmitter",
    "ConfigurationError",
    "Dispatcher",
    "Event",
    "FailureMode",
    "GoogleAnalyticsBinding",
    "InternalAnalyticsBinding",
    "InvalidEventError",
    "LoggingEmitter",
    "MixpanelBinding",
    "PolicyKind",
    "PostHogBinding",
    "ProviderError",
    "ProviderId",
    "SinglePolicy",
    "TrackingException",
    "UnknownProviderError",
    "create_provider",
]
