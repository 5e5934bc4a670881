"""Exceptions raised while logging and projecting events."""

from pathlib import Path

from pydantic import BaseModel


class ShipLogError(Exception):
    """Base class for all shiplog errors."""

    pass


class LogError(ShipLogError):
    """Raised when an event could not be appended to the event log.

    When this is raised the projection has not been touched, so every
    projected effect still has a durable record.

    Attributes:
        retryable: Whether appending the same event again may succeed.
    """

    retryable: bool = False


class SerializationFailed(LogError):
    """The event could not be encoded. Indicates a defect in the event schema."""

    retryable = False


class IoFailure(LogError):
    """The underlying storage rejected the append (disk full, permissions...).

    Attributes:
        path: The log file that could not be written.
    """

    retryable = True

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class UnknownShipReference(ShipLogError):
    """An arrival or departure named a ship that was never enrolled.

    Only raised by projectors running in strict mode; otherwise the event is
    applied as a no-op and reported to observers.

    Attributes:
        ship: Name of the unknown ship.
        payload: The rejected state event.
    """

    def __init__(self, ship: str, payload: BaseModel):
        super().__init__(f"Ship {ship!r} has not been enrolled ({type(payload).__name__})")
        self.ship = ship
        self.payload = payload
