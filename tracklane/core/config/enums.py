"""Configuration enums for type-safe settings.

These enums provide type safety and IDE autocomplete for configuration values.
They inherit from str to maintain JSON serialization compatibility.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Attached to every log record and to PostHog event properties so
    dashboards can segment by deployment.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"


class ProviderId(str, Enum):
    """Closed set of analytics backends a Provider Binding can target."""

    GOOGLE_ANALYTICS = "google_analytics"
    MIXPANEL = "mixpanel"
    INTERNAL = "internal"
    POSTHOG = "posthog"


class PolicyKind(str, Enum):
    """How many emitters receive each tracked event."""

    SINGLE = "single"
    BROADCAST = "broadcast"


class FailureMode(str, Enum):
    """What a broadcast does when one of its targets fails.

    BEST_EFFORT attempts every target and reports an aggregate.
    FAIL_FAST stops at the first failure.
    """

    BEST_EFFORT = "best_effort"
    FAIL_FAST = "fail_fast"
