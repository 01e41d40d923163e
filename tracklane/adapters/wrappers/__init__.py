"""Behavior wrappers (logging, buffering) stackable around any Emitter."""

from tracklane.adapters.wrappers.base import EmitterWrapper
from tracklane.adapters.wrappers.buffered import BufferingEmitter
from tracklane.adapters.wrappers.logged import LoggingEmitter

__all__ = ["BufferingEmitter", "EmitterWrapper", "LoggingEmitter"]
