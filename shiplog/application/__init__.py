"""Application layer: logging events and projecting them into state.

- EventLogWriter: Append-only persistence of event envelopes
- StateProjector: Logs each event, then applies it to a State
- ProjectionObserver: Hooks notified while events are processed
"""

from .observers import LoggingObserver, ProjectionObserver
from .projector import StateProjector
from .writer import EventLogWriter, InMemoryEventLogWriter, JsonlEventLogWriter, serialize_event

__all__ = [
    "EventLogWriter",
    "JsonlEventLogWriter",
    "InMemoryEventLogWriter",
    "serialize_event",
    "StateProjector",
    "ProjectionObserver",
    "LoggingObserver",
]
