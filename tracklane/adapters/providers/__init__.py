"""Provider bindings.

One binding per analytics backend, each translating the uniform
``emit(event)`` call into that backend's native call.
"""

from tracklane.adapters.providers.fake import FakeEmitter
from tracklane.adapters.providers.google_analytics import GoogleAnalyticsBinding
from tracklane.adapters.providers.internal import InternalAnalyticsBinding
from tracklane.adapters.providers.mixpanel import MixpanelBinding
from tracklane.adapters.providers.posthog import PostHogBinding
from tracklane.adapters.providers.registry import create_provider, resolve_provider_id

__all__ = [
    "FakeEmitter",
    "GoogleAnalyticsBinding",
    "InternalAnalyticsBinding",
    "MixpanelBinding",
    "PostHogBinding",
    "create_provider",
    "resolve_provider_id",
]
