"""Log-then-apply processing of state events."""

import logging
from collections.abc import Iterable, Sequence

from ..domain import EnrolShip, Event, State, StateEvent, UnknownShipReference
from .observers import ProjectionObserver
from .writer import EventLogWriter

LOGGER = logging.getLogger(__name__)


class StateProjector:
    """Applies state events to a projection after logging them.

    For every event the projector:
    1. Wraps the payload in a fresh Event envelope (new id, current UTC time)
    2. Appends the envelope through the writer
    3. Applies the payload to the state, in place
    4. Notifies observers, once the state is updated

    If the append fails the error propagates and the state is left as it
    was, so every projected effect has a durable record.

    Arrivals and departures for ships missing from the state are applied as
    no-ops and reported with a warning. In strict mode they are rejected
    with UnknownShipReference before anything is logged.

    Attributes:
        writer: Destination of the event records.
        observers: Hooks notified as events are processed.
        strict: Whether to reject events for unknown ships.

    Examples:
        >>> projector = StateProjector(JsonlEventLogWriter("log.jsonl"))
        >>> state = State()
        >>> projector.process_event(EnrolShip(ship="hms_hello"), state)
        >>> projector.process_event(Arrival(ship="hms_hello", port=Port.TOKYO), state)
        >>> state.get("hms_hello").current_port
        <Port.TOKYO: 'tokyo'>
    """

    def __init__(
        self,
        writer: EventLogWriter,
        observers: Sequence[ProjectionObserver] = (),
        strict: bool = False,
    ):
        self.writer = writer
        self.observers = list(observers)
        self.strict = strict

    def process_event(self, payload: StateEvent, state: State) -> Event:
        """Log a state event and apply it to the state.

        Args:
            payload: The state event to process.
            state: The projection to update in place.

        Returns:
            The envelope that was written to the log.

        Raises:
            LogError: The event could not be logged; state is unchanged.
            UnknownShipReference: Strict mode only, the ship is not enrolled;
                nothing was logged.

        Note:
            Observers run after the state has been updated, so an error raised
            by an observer propagates without leaving a logged event unapplied.
        """
        references_unknown_ship = not isinstance(payload, EnrolShip) and payload.ship not in state
        if references_unknown_ship and self.strict:
            raise UnknownShipReference(payload.ship, payload)

        event = Event(event=payload)
        self.writer.append(event)
        state.apply(payload)

        if references_unknown_ship:
            LOGGER.warning(
                "Event references unknown ship",
                extra={"event_id": event.id, "event_type": payload.tag, "ship": payload.ship},
            )

        for observer in self.observers:
            observer.on_event_logged(event)
            if references_unknown_ship:
                observer.on_unknown_ship(payload, state)
            observer.on_state_changed(event, state)
        return event

    def process_events(self, payloads: Iterable[StateEvent], state: State) -> list[Event]:
        """Process several state events in order, stopping at the first error.

        Args:
            payloads: The state events to process.
            state: The projection to update in place.

        Returns:
            The envelopes written, in order.
        """
        return [self.process_event(payload, state) for payload in payloads]
