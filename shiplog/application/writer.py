"""Append-only event log writers.

A writer persists each Event envelope before the projection is touched, so
``append`` returning is the durability barrier of the projector.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from ..domain import Event, IoFailure, SerializationFailed

LOGGER = logging.getLogger(__name__)

RECORD_SEPARATOR = "\n"


def serialize_event(event: Event) -> str:
    """Encode an event as one log record, separator included.

    Raises:
        SerializationFailed: If the event cannot be encoded.
    """
    try:
        return event.to_json_line() + RECORD_SEPARATOR
    except (TypeError, ValueError) as e:
        raise SerializationFailed(f"Event {event.id} could not be serialized: {e}") from e


class EventLogWriter(ABC):
    """Durable, append-only destination for event records.

    Writers never read, rewrite or truncate what they have written. Each
    successful ``append`` adds exactly one record.

    Attributes:
        appended: Number of records appended by this writer.
    """

    def __init__(self) -> None:
        self.appended = 0

    def append(self, event: Event) -> None:
        """Append a single event record.

        The event is serialized first; nothing is written when that fails.

        Args:
            event: The envelope to persist.

        Raises:
            SerializationFailed: The event could not be encoded.
            IoFailure: The record could not be written.
        """
        record = serialize_event(event)
        self._write(record)
        self.appended += 1

    @abstractmethod
    def _write(self, record: str) -> None:
        """Persist one serialized record including its separator."""
        ...


class JsonlEventLogWriter(EventLogWriter):
    """Writes one JSON object per line to a local file.

    The file is opened per append in append mode, which creates it if absent
    and never truncates it. The record and its newline go out in a single
    write, followed by a flush and, unless disabled, an fsync.

    Examples:
        >>> writer = JsonlEventLogWriter(Path("log.jsonl"))
        >>> writer.append(Event(event=EnrolShip(ship="hms_hello")))
    """

    def __init__(self, path: Path | str, fsync: bool = True):
        """Initialize the writer.

        Args:
            path: Location of the log file.
            fsync: Whether to fsync after every append.
        """
        super().__init__()
        self.path = Path(path)
        self.fsync = fsync

    def _write(self, record: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(record)
                handle.flush()
                if self.fsync:
                    os.fsync(handle.fileno())
        except OSError as e:
            LOGGER.error("Failed to append to event log", extra={"path": str(self.path)})
            raise IoFailure(f"Could not append to {self.path}: {e}", self.path) from e


class InMemoryEventLogWriter(EventLogWriter):
    """Keeps serialized records in memory.

    Useful for tests and demos that should not touch the filesystem.

    Attributes:
        lines: Records written so far, without their separator.
    """

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def _write(self, record: str) -> None:
        self.lines.append(record.removesuffix(RECORD_SEPARATOR))

    def events(self) -> list[Event]:
        """Decode the records written so far."""
        return [Event.from_json_line(line) for line in self.lines]
