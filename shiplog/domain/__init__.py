"""Domain model for the ship tracking event log.

This module contains the building blocks that are logged and projected:

- Port: Closed enumeration of harbors
- Ship: A tracked vessel and the port it is docked at
- EnrolShip, Arrival, Departure: The state events (StateEvent)
- Event: Durable envelope written to the log
- State: Projection of ship name to ship
- ShipLogError and subclasses: Failures while logging or projecting
"""

from .event import (
    STATE_EVENT_TYPES,
    Arrival,
    Departure,
    EnrolShip,
    Event,
    ShipEvent,
    StateEvent,
    new_event_id,
    utc_timestamp,
)
from .exceptions import (
    IoFailure,
    LogError,
    SerializationFailed,
    ShipLogError,
    UnknownShipReference,
)
from .port import Port
from .projection import Projection
from .ship import Ship
from .state import State

__all__ = [
    "Port",
    "Ship",
    "ShipEvent",
    "EnrolShip",
    "Arrival",
    "Departure",
    "StateEvent",
    "STATE_EVENT_TYPES",
    "Event",
    "new_event_id",
    "utc_timestamp",
    "Projection",
    "State",
    "ShipLogError",
    "LogError",
    "SerializationFailed",
    "IoFailure",
    "UnknownShipReference",
]
