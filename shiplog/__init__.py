"""shiplog - Event-sourced tracking of ships and the ports they dock at.

This module provides the public API: the domain events, the projection they
fold into, and the projector that logs each event before applying it.
"""

from .application import (
    EventLogWriter,
    InMemoryEventLogWriter,
    JsonlEventLogWriter,
    LoggingObserver,
    ProjectionObserver,
    StateProjector,
)
from .config import ShipLogConfiguration
from .domain import (
    Arrival,
    Departure,
    EnrolShip,
    Event,
    IoFailure,
    LogError,
    Port,
    SerializationFailed,
    Ship,
    ShipLogError,
    State,
    StateEvent,
    UnknownShipReference,
)
from .routing import applies_event

__all__ = [
    # Configuration
    "ShipLogConfiguration",
    # Domain
    "Port",
    "Ship",
    "EnrolShip",
    "Arrival",
    "Departure",
    "StateEvent",
    "Event",
    "State",
    # Errors
    "ShipLogError",
    "LogError",
    "SerializationFailed",
    "IoFailure",
    "UnknownShipReference",
    # Processing
    "EventLogWriter",
    "JsonlEventLogWriter",
    "InMemoryEventLogWriter",
    "StateProjector",
    "ProjectionObserver",
    "LoggingObserver",
    # Decorators
    "applies_event",
]
