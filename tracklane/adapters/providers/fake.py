"""Fake emitter for testing."""

from typing import List, Optional

from tracklane.core.events import Event


class FakeEmitter:
    """In-memory test double for the Emitter protocol.

    Records every emitted event. Optionally appends ``name`` to a shared
    ``journal`` list so tests can assert ordering across several emitters
    and wrappers, and optionally raises to simulate a failing backend.

    Usage:
        journal = []
        a = FakeEmitter("a", journal=journal)
        b = FakeEmitter("b", journal=journal, should_raise=ProviderError("b"))
        ...
        assert journal == ["a", "b"]
    """

    def __init__(
        self,
        name: str = "fake",
        journal: Optional[list] = None,
        should_raise: Optional[Exception] = None,
    ) -> None:
        """Initialize with empty event list."""
        self.name = name
        self.events: List[Event] = []
        self._journal = journal
        self._should_raise = should_raise

    def emit(self, event: Event) -> None:
        """Record the event, then raise if configured to."""
        self.events.append(event)
        if self._journal is not None:
            self._journal.append(self.name)
        if self._should_raise is not None:
            raise self._should_raise

    # Test helpers

    @property
    def call_count(self) -> int:
        """Number of times emit was called."""
        return len(self.events)

    def has(self, event_name: str) -> bool:
        """Return True if an event with the given name was emitted."""
        return any(e.name == event_name for e in self.events)

    def get(self, event_name: str) -> Event:
        """Return the first emitted event matching name, or raise AssertionError."""
        for e in self.events:
            if e.name == event_name:
                return e
        raise AssertionError(
            f"No event '{event_name}' emitted to '{self.name}'. "
            f"Emitted: {[e.name for e in self.events]}"
        )

    def clear(self) -> None:
        """Reset recorded events."""
        self.events.clear()
