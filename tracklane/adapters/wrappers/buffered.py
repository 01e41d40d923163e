"""Buffering wrapper."""

import threading
from collections import deque
from typing import Deque, List

from tracklane.adapters.wrappers.base import EmitterWrapper
from tracklane.core.events import Event
from tracklane.core.logging import logger
from tracklane.core.protocols import Emitter


class BufferingEmitter(EmitterWrapper):
    """Marks each event as buffered, then delegates.

    Buffered events are kept in a bounded ring buffer (oldest evicted)
    that callers can inspect or drain. Delivery is never deferred: the
    wrapped emitter is called on every emit.
    """

    DEFAULT_CAPACITY = 1000

    def __init__(self, wrapped: Emitter, capacity: int = DEFAULT_CAPACITY) -> None:
        """Wrap ``wrapped`` with a buffer holding at most ``capacity`` events."""
        if capacity <= 0:
            raise ValueError("Buffer capacity must be positive")
        super().__init__(wrapped)
        self._buffer: Deque[Event] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def _before_emit(self, event: Event) -> None:
        with self._lock:
            self._buffer.append(event)
        logger.debug(f"[BUFFER] Buffering event '{event.name}' for '{self.name}'")

    @property
    def capacity(self) -> int:
        """Maximum number of events retained."""
        return self._buffer.maxlen or 0

    @property
    def buffered(self) -> List[Event]:
        """Snapshot of buffered events, oldest first."""
        with self._lock:
            return list(self._buffer)

    def drain(self) -> List[Event]:
        """Return all buffered events and empty the buffer."""
        with self._lock:
            events = list(self._buffer)
            self._buffer.clear()
        return events
