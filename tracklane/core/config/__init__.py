"""Configuration module for tracklane.

Provides centralized configuration management with type-safe enums.

Usage:
    from tracklane.core.config import get_settings, PolicyKind

    if get_settings().TRACKING_POLICY == PolicyKind.BROADCAST:
        ...

The tracking ``Settings`` singleton is built on first use, not at import,
so invalid tracking variables only fail the code paths that wire from
settings (``create_container``, ``initialize_container``).
``from tracklane.core.config import settings`` still works and builds it.
"""

from functools import lru_cache

from tracklane.core.config.enums import Environment, FailureMode, PolicyKind, ProviderId
from tracklane.core.config.settings import LoggingSettings, Settings

__all__ = [
    "Settings",
    "LoggingSettings",
    "Environment",
    "FailureMode",
    "PolicyKind",
    "ProviderId",
    "get_settings",
]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings, loading it on first call.

    Raises:
        pydantic.ValidationError: If the environment holds invalid values.
    """
    return Settings()


def __getattr__(name: str):
    if name == "settings":
        return get_settings()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
