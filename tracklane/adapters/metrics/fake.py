"""Fake dispatch metrics for testing."""

from typing import List


class FakeDispatchMetrics:
    """In-memory test double for DispatchMetrics.

    Records every counter increment as a plain list entry.
    """

    def __init__(self) -> None:
        self.tracked: List[str] = []
        self.failures: List[str] = []

    def inc_tracked(self, policy: str) -> None:
        self.tracked.append(policy)

    def inc_failure(self, provider: str) -> None:
        self.failures.append(provider)

    def clear(self) -> None:
        """Reset all recorded state."""
        self.tracked.clear()
        self.failures.clear()
