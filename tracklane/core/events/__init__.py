"""Event values carried through the dispatch pipeline."""

from tracklane.core.events.base import Event

__all__ = ["Event"]
