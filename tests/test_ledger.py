"""Tests for ledger functionality."""

import json
from datetime import datetime

import pytest

from foodchain.errors import InvalidEventError, LedgerError
from foodchain.ledger import Ledger
from foodchain.models.ledger import EventType


def test_ledger_append_assigns_id_and_timestamp(ledger, harvest_input):
    """Test that appending assigns the base id and a UTC timestamp."""
    event = ledger.append(harvest_input)

    assert event.id == 1001
    assert event.event_type == EventType.HARVEST
    assert event.product_id == "TOMATO_BATCH_001"
    assert event.actor_id == "farmer_001"
    assert event.details["quantityKg"] == 500
    assert event.timestamp.tzinfo is not None
    assert event.violation_detected is None
    assert len(ledger) == 1


def test_ledger_ids_strictly_increasing_without_gaps(ledger, harvest_input):
    """Test that N appends yield consecutive ids from the base."""
    ids = [ledger.append(harvest_input).id for _ in range(25)]

    assert ids == list(range(1001, 1026))


def test_ledger_custom_base_id(harvest_input):
    """Test that the base id is configurable."""
    ledger = Ledger(base_id=1)

    assert ledger.append(harvest_input).id == 1
    assert ledger.append(harvest_input).id == 2


def test_ledger_preserves_append_order(ledger, harvest_input, make_transport, make_payment):
    """Test that events come back in the order they were appended."""
    first = ledger.append(harvest_input)
    second = ledger.append(make_transport(30, 50))
    third = ledger.append(make_payment())

    assert [e.id for e in ledger.events] == [first.id, second.id, third.id]
    assert [e.id for e in ledger] == [first.id, second.id, third.id]


def test_ledger_timestamps_are_sortable(ledger, harvest_input):
    """Test that later appends never carry an earlier timestamp."""
    events = [ledger.append(harvest_input) for _ in range(5)]

    stamps = [e.timestamp for e in events]
    assert stamps == sorted(stamps)


def test_ledger_append_accepts_camelcase_dict(ledger):
    """Test appending a plain record in scenario JSON shape."""
    event = ledger.append(
        {
            "eventType": "PROCESS",
            "actorId": "processor_NGR_001",
            "productId": "TOMATO_BATCH_001",
            "location": "Lagos Processing Plant",
            "details": {"batchNo": "TPJ-20250522-001"},
        }
    )

    assert event.event_type == EventType.PROCESS
    assert event.details == {"batchNo": "TPJ-20250522-001"}


def test_ledger_append_rejects_unknown_event_type(ledger):
    """Test that a record with an unknown type fails with the field named."""
    with pytest.raises(InvalidEventError) as exc_info:
        ledger.append({"eventType": "SHIPWRECK", "actorId": "a", "productId": "p"})

    assert exc_info.value.field == "eventType"
    assert len(ledger) == 0


def test_ledger_details_are_copied_on_append(ledger, make_transport):
    """Test that mutating the caller's dict does not change the stored event."""
    record = make_transport(22, 50)
    event = ledger.append(record)

    record.details["currentTempCelsius"] = 99

    assert ledger.get(event.id).details["currentTempCelsius"] == 22


def test_find_by_product_with_violation_empty(ledger, harvest_input):
    """Test lookup with no flagged events."""
    ledger.append(harvest_input)

    assert ledger.find_by_product_with_violation("TOMATO_BATCH_001") == []


def test_find_by_product_with_violation_filters(ledger, make_transport):
    """Test that only flagged events for the product are returned, in order."""
    a = ledger.append(make_transport(30, 50))
    b = ledger.append(make_transport(22, 50))
    c = ledger.append(make_transport(30, 50, product_id="ONION_BATCH_002"))
    d = ledger.append(make_transport(35, 50))
    ledger.mark_violation(a.id, True)
    ledger.mark_violation(b.id, False)
    ledger.mark_violation(c.id, True)
    ledger.mark_violation(d.id, True)

    found = ledger.find_by_product_with_violation("TOMATO_BATCH_001")

    assert [e.id for e in found] == [a.id, d.id]


def test_find_by_product_with_violation_is_repeatable(ledger, make_transport):
    """Test that two queries without appends return identical results."""
    event = ledger.append(make_transport(30, 50))
    ledger.mark_violation(event.id, True)

    first = ledger.find_by_product_with_violation("TOMATO_BATCH_001")
    second = ledger.find_by_product_with_violation("TOMATO_BATCH_001")

    assert first == second


def test_find_by_product_with_violation_sees_later_appends(ledger, make_transport):
    """Test that a query reflects events flagged after an earlier query."""
    assert ledger.find_by_product_with_violation("TOMATO_BATCH_001") == []

    event = ledger.append(make_transport(30, 50))
    ledger.mark_violation(event.id, True)

    assert len(ledger.find_by_product_with_violation("TOMATO_BATCH_001")) == 1


def test_mark_violation_replaces_stored_event(ledger, make_transport):
    """Test that the flag lands on the stored event, keeping its position."""
    ledger.append(make_transport(22, 50))
    event = ledger.append(make_transport(30, 50))

    updated = ledger.mark_violation(event.id, True)

    assert updated.violation_detected is True
    assert updated.id == event.id
    assert updated.timestamp == event.timestamp
    assert ledger.events[1] is updated
    # The returned pre-update event is not mutated
    assert event.violation_detected is None


def test_mark_violation_only_once(ledger, make_transport):
    """Test that the flag cannot be rewritten."""
    event = ledger.append(make_transport(30, 50))
    ledger.mark_violation(event.id, True)

    with pytest.raises(LedgerError):
        ledger.mark_violation(event.id, False)

    assert ledger.get(event.id).violation_detected is True


def test_mark_violation_rejects_non_condition_event(ledger, harvest_input):
    """Test that harvest and payment events cannot be flagged."""
    event = ledger.append(harvest_input)

    with pytest.raises(LedgerError):
        ledger.mark_violation(event.id, True)


def test_mark_violation_unknown_id(ledger):
    """Test flagging an id that was never assigned."""
    with pytest.raises(LedgerError):
        ledger.mark_violation(4242, True)


def test_ledger_to_json_format(ledger, make_transport):
    """Test that the exported state uses camelCase keys and ISO8601 UTC timestamps."""
    event = ledger.append(make_transport(30, 50))
    ledger.mark_violation(event.id, True)

    data = json.loads(ledger.to_json())

    assert len(data) == 1
    record = data[0]
    assert record["id"] == 1001
    assert record["eventType"] == "TRANSPORT"
    assert record["productId"] == "TOMATO_BATCH_001"
    assert record["actorId"] == "logistics_NGR_002"
    assert record["violationDetected"] is True
    assert record["details"]["thresholds"]["maxTemp"] == 28

    parsed = datetime.fromisoformat(record["timestamp"].replace("Z", "+00:00"))
    assert parsed.tzinfo is not None, "Timestamp should include timezone info"
