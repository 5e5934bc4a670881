from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from ulid import ULID

from .port import Port


def utc_timestamp() -> int:
    """Get the current UTC time in whole seconds since the UNIX epoch.

    Returns:
        Seconds since 1970-01-01T00:00:00Z

    Note:
        Used as default_factory for Event.ts so that every envelope is
        stamped in UTC regardless of the system timezone.
    """
    return int(datetime.now(tz=timezone.utc).timestamp())


def new_event_id() -> str:
    """Generate a fresh, lexicographically sortable event identifier."""
    return str(ULID())


class ShipEvent(BaseModel):
    """Base class for the domain actions that change a ship's state.

    Every variant names the ship it concerns and carries a ``tag`` used as
    the discriminator in the event log.
    """

    model_config = ConfigDict(frozen=True)

    tag: ClassVar[str]

    ship: str = Field(min_length=1, description="Name of the ship the event concerns")


class EnrolShip(ShipEvent):
    """Adds a new ship to the oceans."""

    tag: ClassVar[str] = "enrol_ship"


class Arrival(ShipEvent):
    """The ship has arrived at a port."""

    tag: ClassVar[str] = "arrival"

    port: Port


class Departure(ShipEvent):
    """The ship has left a port and is out at sea."""

    tag: ClassVar[str] = "departure"


StateEvent = EnrolShip | Arrival | Departure

STATE_EVENT_TYPES: dict[str, type[ShipEvent]] = {
    event_type.tag: event_type for event_type in (EnrolShip, Arrival, Departure)
}


class Event(BaseModel):
    """Durable envelope around a single state event.

    An Event is created once per accepted StateEvent, appended to the log
    exactly once and never modified afterwards.

    Attributes:
        id: Unique identifier of this record (a ULID string)
        ts: When the event was recorded, in seconds since the epoch (UTC)
        event: The domain payload

    In the log the payload is externally tagged by its variant name:

        >>> Event(id="a", ts=1700000000, event=EnrolShip(ship="hms_hello")).to_json_line()
        '{"id":"a","ts":1700000000,"event":{"enrol_ship":{"ship":"hms_hello"}}}'
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=new_event_id,
        min_length=1,
        description="Unique identifier for this event record",
    )
    ts: int = Field(
        default_factory=utc_timestamp,
        ge=0,
        description="When the event was recorded (seconds since epoch, UTC)",
    )
    event: StateEvent = Field(description="The state event payload")

    @field_validator("event", mode="before")
    @classmethod
    def _untag_event(cls, value: Any) -> Any:
        if isinstance(value, ShipEvent):
            return value
        if not isinstance(value, dict) or len(value) != 1:
            raise ValueError("event must be an object with exactly one variant tag")
        ((tag, fields),) = value.items()
        event_type = STATE_EVENT_TYPES.get(tag)
        if event_type is None:
            raise ValueError(f"unknown event tag {tag!r}")
        return event_type.model_validate(fields)

    @field_serializer("event")
    def _tag_event(self, event: ShipEvent) -> dict[str, Any]:
        return {event.tag: event.model_dump(mode="json")}

    def to_json_line(self) -> str:
        """Serialize the envelope as one compact JSON object, without newline."""
        return self.model_dump_json()

    @classmethod
    def from_json_line(cls, line: str) -> "Event":
        """Parse a single log line back into an Event."""
        return cls.model_validate_json(line)
