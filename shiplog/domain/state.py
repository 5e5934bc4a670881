from collections.abc import Iterator

from pydantic import Field

from ..routing import applies_event
from .event import Arrival, Departure, EnrolShip
from .projection import Projection
from .ship import Ship


class State(Projection):
    """Projection of every enrolled ship to its current port.

    Ships are added on enrolment and updated in place afterwards; no event
    removes a ship. Arrivals and departures for ships that were never
    enrolled leave the state unchanged.

    Attributes:
        ships: Enrolled ships keyed by name.
    """

    ships: dict[str, Ship] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.ships)

    def __iter__(self) -> Iterator[Ship]:  # type: ignore[override]
        return iter(self.ships.values())

    def __contains__(self, name: object) -> bool:
        return name in self.ships

    def get(self, name: str) -> Ship | None:
        return self.ships.get(name)

    @applies_event
    def apply_enrol_ship(self, event: EnrolShip) -> None:
        # Re-enrolling replaces the ship, which puts it back at sea
        self.ships[event.ship] = Ship(name=event.ship)

    @applies_event
    def apply_arrival(self, event: Arrival) -> None:
        ship = self.ships.get(event.ship)
        if ship is not None:
            ship.current_port = event.port

    @applies_event
    def apply_departure(self, event: Departure) -> None:
        ship = self.ships.get(event.ship)
        if ship is not None:
            ship.current_port = None
