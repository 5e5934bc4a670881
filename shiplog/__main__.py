"""Run the reference voyage against the configured event log."""

import logging

from . import Arrival, Departure, EnrolShip, Port, ShipLogConfiguration, State

VOYAGE = (
    EnrolShip(ship="hms_at_sea"),
    EnrolShip(ship="hms_hello"),
    Arrival(ship="hms_at_sea", port=Port.SAN_FRANCISCO),
    Arrival(ship="hms_hello", port=Port.TOKYO),
    Departure(ship="hms_hello"),
)


def main() -> State:
    config = ShipLogConfiguration()
    logging.basicConfig(level=config.log_level)

    state = State()
    config.projector().process_events(VOYAGE, state)
    for ship in state:
        logging.getLogger(__name__).info(
            "%s: %s", ship.name, "at sea" if ship.at_sea else ship.current_port.value
        )
    return state


if __name__ == "__main__":
    main()
