"""Application settings.

All defaults are defined here in the schema. Values are loaded from
environment variables (and an optional ``.env`` file) by Pydantic Settings.
"""

from typing import List, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tracklane.core.config.enums import Environment, FailureMode, PolicyKind


def _split_csv(value: str) -> List[str]:
    return [item.strip().lower() for item in value.split(",") if item.strip()]


class LoggingSettings(BaseSettings):
    """Settings the package logger needs at import time.

    Kept apart from the tracking settings so that a host with an invalid
    tracking environment can still import the library and wire a
    Dispatcher by hand.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: str = "INFO"


class Settings(LoggingSettings):
    """Tracking pipeline settings with automatic env var loading.

    Provider lists are plain comma-separated strings so they can be set
    from a shell without JSON quoting:
        TRACKING_PROVIDERS=google_analytics,mixpanel
    The parsed lists are exposed as lowercase properties. Identifiers are
    not checked here; the provider registry rejects unknown ones when the
    container is built.
    """

    TRACKING_POLICY: PolicyKind = PolicyKind.SINGLE
    TRACKING_FAILURE_MODE: FailureMode = FailureMode.BEST_EFFORT
    TRACKING_PROVIDERS: str = Field(
        "internal", description="Comma-separated provider ids receiving events"
    )
    TRACKING_LOGGED_PROVIDERS: str = Field(
        "", description="Providers wrapped in a LoggingEmitter"
    )
    TRACKING_BUFFERED_PROVIDERS: str = Field(
        "", description="Providers wrapped in a BufferingEmitter"
    )
    TRACKING_BUFFER_SIZE: int = Field(1000, gt=0)

    POSTHOG_API_KEY: Optional[str] = None
    POSTHOG_HOST: str = "https://us.i.posthog.com"
    POSTHOG_DISTINCT_ID: str = "tracklane"

    METRICS_ENABLED: bool = True

    @property
    def tracking_providers(self) -> List[str]:
        """Provider ids that receive events, in registration order."""
        return _split_csv(self.TRACKING_PROVIDERS)

    @property
    def logged_providers(self) -> set[str]:
        """Provider ids whose emitter chain gets a logging wrapper."""
        return set(_split_csv(self.TRACKING_LOGGED_PROVIDERS))

    @property
    def buffered_providers(self) -> set[str]:
        """Provider ids whose emitter chain gets a buffering wrapper."""
        return set(_split_csv(self.TRACKING_BUFFERED_PROVIDERS))

    @model_validator(mode="after")
    def validate_policy_targets(self):
        """A single-target policy needs exactly one provider."""
        providers = self.tracking_providers
        if not providers:
            raise ValueError("TRACKING_PROVIDERS must name at least one provider")
        if self.TRACKING_POLICY == PolicyKind.SINGLE and len(providers) != 1:
            raise ValueError(
                "TRACKING_POLICY=single requires exactly one provider, "
                f"got {len(providers)}: {', '.join(providers)}"
            )
        return self
