"""Central test fixtures."""

from pathlib import Path

import pytest

from shiplog.application import InMemoryEventLogWriter, JsonlEventLogWriter, StateProjector
from shiplog.domain import Arrival, Departure, EnrolShip, Port, State


@pytest.fixture
def state() -> State:
    """Create an empty projection."""
    return State()


@pytest.fixture
def memory_writer() -> InMemoryEventLogWriter:
    """Create an in-memory event log writer."""
    return InMemoryEventLogWriter()


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Location of a log file that does not exist yet."""
    return tmp_path / "log.jsonl"


@pytest.fixture
def jsonl_writer(log_path: Path) -> JsonlEventLogWriter:
    """Create a file writer without fsync to keep tests fast."""
    return JsonlEventLogWriter(log_path, fsync=False)


@pytest.fixture
def projector(memory_writer: InMemoryEventLogWriter) -> StateProjector:
    """Create a projector backed by the in-memory writer."""
    return StateProjector(memory_writer)


@pytest.fixture
def voyage() -> list:
    """The reference sequence of five events."""
    return [
        EnrolShip(ship="hms_at_sea"),
        EnrolShip(ship="hms_hello"),
        Arrival(ship="hms_at_sea", port=Port.SAN_FRANCISCO),
        Arrival(ship="hms_hello", port=Port.TOKYO),
        Departure(ship="hms_at_sea"),
    ]
