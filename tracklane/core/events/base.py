"""Tracked event value.

An Event is created by the Dispatcher for a single ``track`` call and
handed, unchanged, to every emitter the active policy resolves. It is a
frozen Pydantic model so no emitter can mutate it mid-broadcast.
"""

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """A named telemetry event with an opaque payload.

    The payload is an already-serialized string; nothing in the pipeline
    parses or rewrites it.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(min_length=1)
    payload: str = ""
