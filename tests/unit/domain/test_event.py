"""Tests for the Event envelope and its log representation."""

import json

import pytest
from pydantic import ValidationError

from shiplog.domain import (
    STATE_EVENT_TYPES,
    Arrival,
    Departure,
    EnrolShip,
    Event,
    Port,
    new_event_id,
    utc_timestamp,
)


def test_serializes_reference_line_exactly():
    event = Event(id="a", ts=1700000000, event=EnrolShip(ship="hms_hello"))

    assert event.to_json_line() == (
        '{"id":"a","ts":1700000000,"event":{"enrol_ship":{"ship":"hms_hello"}}}'
    )


def test_arrival_is_tagged_with_snake_case_port():
    event = Event(id="b", ts=1, event=Arrival(ship="hms_hello", port=Port.HONG_KONG))

    record = json.loads(event.to_json_line())

    assert record["event"] == {"arrival": {"ship": "hms_hello", "port": "hong_kong"}}


def test_departure_is_tagged():
    event = Event(id="c", ts=2, event=Departure(ship="hms_hello"))

    assert json.loads(event.to_json_line())["event"] == {"departure": {"ship": "hms_hello"}}


def test_parses_reference_line():
    line = '{"id":"a","ts":1700000000,"event":{"enrol_ship":{"ship":"hms_hello"}}}'

    event = Event.from_json_line(line)

    assert event.id == "a"
    assert event.ts == 1700000000
    assert event.event == EnrolShip(ship="hms_hello")


def test_parsing_keeps_variant_with_identical_fields():
    line = '{"id":"d","ts":3,"event":{"departure":{"ship":"hms_hello"}}}'

    event = Event.from_json_line(line)

    assert type(event.event) is Departure


@pytest.mark.parametrize(
    "payload",
    [
        EnrolShip(ship="hms_at_sea"),
        Arrival(ship="hms_at_sea", port=Port.LOS_ANGELES),
        Departure(ship="hms_at_sea"),
    ],
)
def test_line_parses_back_to_same_event(payload):
    event = Event(event=payload)

    parsed = Event.from_json_line(event.to_json_line())

    assert parsed == event
    assert type(parsed.event) is type(payload)


def test_rejects_unknown_tag():
    with pytest.raises(ValidationError, match="unknown event tag"):
        Event.from_json_line('{"id":"a","ts":1,"event":{"decommission":{"ship":"x"}}}')


def test_rejects_untagged_payload():
    with pytest.raises(ValidationError):
        Event.from_json_line('{"id":"a","ts":1,"event":{"ship":"x"}}')


def test_rejects_unknown_port():
    with pytest.raises(ValidationError):
        Event.from_json_line('{"id":"a","ts":1,"event":{"arrival":{"ship":"x","port":"atlantis"}}}')


def test_rejects_negative_timestamp():
    with pytest.raises(ValidationError):
        Event(ts=-1, event=EnrolShip(ship="hms_hello"))


def test_defaults_stamp_fresh_id_and_current_time():
    before = utc_timestamp()
    first = Event(event=EnrolShip(ship="hms_hello"))
    second = Event(event=EnrolShip(ship="hms_hello"))
    after = utc_timestamp()

    assert first.id != second.id
    assert before <= first.ts <= after


def test_event_ids_are_unique():
    assert len({new_event_id() for _ in range(1000)}) == 1000


def test_envelope_is_immutable():
    event = Event(event=EnrolShip(ship="hms_hello"))

    with pytest.raises(ValidationError):
        event.ts = 0  # type: ignore[misc]


def test_payload_is_immutable():
    payload = EnrolShip(ship="hms_hello")

    with pytest.raises(ValidationError):
        payload.ship = "hms_other"  # type: ignore[misc]


def test_ship_name_is_required():
    with pytest.raises(ValidationError):
        EnrolShip(ship="")


def test_every_variant_has_unique_tag():
    assert set(STATE_EVENT_TYPES) == {"enrol_ship", "arrival", "departure"}
