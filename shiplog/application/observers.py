"""Observation hooks for the state projector."""

import logging

from ..domain import Arrival, Event, ShipEvent, State

LOGGER = logging.getLogger(__name__)


class ProjectionObserver:
    """Receives notifications as the projector processes events.

    All hooks are no-ops by default; override the ones you need.
    """

    def on_event_logged(self, event: Event) -> None:
        """Called once the envelope has been durably appended and applied."""
        pass

    def on_state_changed(self, event: Event, state: State) -> None:
        """Called after the event has been applied to the state."""
        pass

    def on_unknown_ship(self, payload: ShipEvent, state: State) -> None:
        """Called when an arrival or departure names an unenrolled ship."""
        pass


class LoggingObserver(ProjectionObserver):
    """Observer that logs each processed event with structured fields.

    Only the event type, ship, port and event id are logged; the state
    itself is summarised by its size.

    Attributes:
        level: The numeric logging level (e.g., logging.INFO,
            logging.DEBUG).

    Examples:
        >>> projector = StateProjector(writer, observers=[LoggingObserver("INFO")])
    """

    def __init__(self, level: str):
        """Initialize the logging observer.

        Args:
            level: String representation of the log level (e.g.,
                "INFO", "DEBUG"). Case-insensitive.
        """
        self.level = getattr(logging, level.upper())

    def _extra(self, event: Event) -> dict[str, str]:
        payload = event.event
        extra = {
            "event_id": event.id,
            "event_type": payload.tag,
            "ship": payload.ship,
        }
        if isinstance(payload, Arrival):
            extra["port"] = payload.port.value
        return extra

    def on_event_logged(self, event: Event) -> None:
        LOGGER.log(self.level, "Event logged", extra=self._extra(event))

    def on_state_changed(self, event: Event, state: State) -> None:
        extra = self._extra(event)
        ship = state.get(event.event.ship)
        if ship is None:
            extra["current_port"] = "unknown"
        elif ship.current_port is None:
            extra["current_port"] = "at_sea"
        else:
            extra["current_port"] = ship.current_port.value
        LOGGER.log(self.level, "State updated (%d ships)", len(state), extra=extra)
