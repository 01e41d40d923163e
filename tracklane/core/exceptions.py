"""Shared exceptions module."""

from typing import List, Optional, Sequence


class TrackingException(Exception):
    """Base exception for tracklane."""

    pass


class ConfigurationError(TrackingException):
    """Exception raised when the dispatch pipeline is wired incorrectly."""

    def __init__(self, message: Optional[str] = "Tracking pipeline is misconfigured"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class UnknownProviderError(ConfigurationError):
    """Raised when a provider identifier does not name a known backend."""

    def __init__(self, provider_id: str):
        """Initialize with the unrecognised identifier."""
        self.provider_id = provider_id
        super().__init__(f"Unknown analytics provider: '{provider_id}'")


class InvalidEventError(TrackingException):
    """Raised when an event cannot be constructed from the caller's input."""

    def __init__(self, message: Optional[str] = "Invalid event"):
        """Create a new InvalidEventError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class ProviderError(TrackingException):
    """Raised when an analytics backend rejects or fails an emit call."""

    def __init__(self, provider: str, message: Optional[str] = None):
        """Create a new ProviderError instance.

        Args:
        ----
            provider (str): Name of the backend that failed.
            message (str, optional): Failure detail.

        """
        self.provider = provider
        self.message = message or "emit failed"
        super().__init__(f"Provider '{provider}' failed: {self.message}")


class BroadcastError(TrackingException):
    """Aggregate of provider failures from a best-effort broadcast."""

    def __init__(self, errors: Sequence[ProviderError]):
        """Initialize with the failures, in target order."""
        self.errors: List[ProviderError] = list(errors)
        super().__init__(
            f"{len(self.errors)} provider(s) failed during broadcast: "
            + "; ".join(str(e) for e in self.errors)
        )

    @property
    def providers(self) -> List[str]:
        """Names of the failed providers, in target order."""
        return [e.provider for e in self.errors]
