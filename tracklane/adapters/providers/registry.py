"""Provider registry.

Maps the closed ``ProviderId`` enumeration to binding constructors.
Unknown identifiers fail with ``UnknownProviderError`` instead of
returning nothing.
"""

from typing import Callable, Dict, Union

import posthog

from tracklane.adapters.providers.google_analytics import GoogleAnalyticsBinding
from tracklane.adapters.providers.internal import InternalAnalyticsBinding
from tracklane.adapters.providers.mixpanel import MixpanelBinding
from tracklane.adapters.providers.posthog import PostHogBinding
from tracklane.adapters.providers.sdks import (
    GoogleAnalyticsSdk,
    InternalAnalyticsSdk,
    MixpanelSdk,
)
from tracklane.core.config import Settings
from tracklane.core.config.enums import ProviderId
from tracklane.core.exceptions import ConfigurationError, UnknownProviderError
from tracklane.core.protocols import Emitter

ProviderBuilder = Callable[[Settings], Emitter]


def _build_google_analytics(settings: Settings) -> Emitter:
    return GoogleAnalyticsBinding(GoogleAnalyticsSdk())


def _build_mixpanel(settings: Settings) -> Emitter:
    return MixpanelBinding(MixpanelSdk())


def _build_internal(settings: Settings) -> Emitter:
    return InternalAnalyticsBinding(InternalAnalyticsSdk())


def _build_posthog(settings: Settings) -> Emitter:
    if not settings.POSTHOG_API_KEY:
        raise ConfigurationError("POSTHOG_API_KEY is required for the posthog provider")
    client = posthog.Posthog(settings.POSTHOG_API_KEY, host=settings.POSTHOG_HOST)
    return PostHogBinding(
        client,
        distinct_id=settings.POSTHOG_DISTINCT_ID,
        environment=settings.ENVIRONMENT.value,
    )


_BUILDERS: Dict[ProviderId, ProviderBuilder] = {
    ProviderId.GOOGLE_ANALYTICS: _build_google_analytics,
    ProviderId.MIXPANEL: _build_mixpanel,
    ProviderId.INTERNAL: _build_internal,
    ProviderId.POSTHOG: _build_posthog,
}


def resolve_provider_id(provider_id: Union[ProviderId, str]) -> ProviderId:
    """Return the ProviderId for an enum member or its string value.

    Raises:
        UnknownProviderError: If the identifier is not a known provider.
    """
    if isinstance(provider_id, ProviderId):
        return provider_id
    try:
        return ProviderId(provider_id)
    except ValueError:
        raise UnknownProviderError(str(provider_id)) from None


def create_provider(provider_id: Union[ProviderId, str], settings: Settings) -> Emitter:
    """Build the Provider Binding for ``provider_id``.

    Args:
        provider_id: A ProviderId or its string value (e.g. ``"mixpanel"``).
        settings: Application settings; only PostHog reads credentials.

    Returns:
        A binding satisfying the Emitter protocol.

    Raises:
        UnknownProviderError: If the identifier is not a known provider.
        ConfigurationError: If the provider's settings are incomplete.
    """
    return _BUILDERS[resolve_provider_id(provider_id)](settings)
