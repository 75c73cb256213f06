"""Append-only in-memory ledger for the supply chain simulator."""

import copy
import json
import logging
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Any

from .config import DEFAULT_BASE_TRANSACTION_ID
from .errors import LedgerError
from .models.ledger import EventInput, LedgerEvent

logger = logging.getLogger(__name__)


class Ledger:
    """Append-only ordered store of ledger events.

    Assigns strictly increasing ids starting at base_id. Events are never
    removed or reordered; the violation flag is the only thing that can be
    written after append, and only once, through mark_violation.
    """

    def __init__(self, base_id: int = DEFAULT_BASE_TRANSACTION_ID):
        """Initialize an empty ledger.

        Args:
            base_id: Id given to the first appended event
        """
        self.base_id = base_id
        self._next_id = base_id
        self._events: list[LedgerEvent] = []
        self._positions: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[LedgerEvent]:
        return iter(tuple(self._events))

    @property
    def events(self) -> tuple[LedgerEvent, ...]:
        """Snapshot of all events in append order."""
        return tuple(self._events)

    def append(self, record: EventInput | dict[str, Any]) -> LedgerEvent:
        """Append an event to the ledger.

        Args:
            record: Event input (or a plain dict in scenario JSON shape)

        Returns:
            The stored LedgerEvent with its id and timestamp
        """
        if not isinstance(record, EventInput):
            record = EventInput.from_record(record)

        event = LedgerEvent(
            id=self._next_id,
            actor_id=record.actor_id,
            product_id=record.product_id,
            timestamp=datetime.now(timezone.utc),
            location=record.location,
            event_type=record.event_type,
            details=copy.deepcopy(record.details),
        )
        self._next_id += 1

        self._positions[event.id] = len(self._events)
        self._events.append(event)

        logger.info(
            f"Added transaction {event.id}: {event.event_type.value} for product {event.product_id}"
        )
        return event

    def get(self, event_id: int) -> LedgerEvent:
        """Return the stored event with the given id.

        Raises:
            LedgerError: If no event has that id
        """
        position = self._positions.get(event_id)
        if position is None:
            raise LedgerError(f"Unknown transaction id: {event_id}")
        return self._events[position]

    def find_by_product_with_violation(self, product_id: str) -> list[LedgerEvent]:
        """Return events for a product whose violation flag is exactly True.

        Events never evaluated (flag None) count as no violation.

        Args:
            product_id: Product or batch identifier

        Returns:
            Matching events in append order
        """
        return [
            event
            for event in self._events
            if event.product_id == product_id and event.violation_detected is True
        ]

    def mark_violation(self, event_id: int, detected: bool) -> LedgerEvent:
        """Record the outcome of a conditions check on a stored event.

        Args:
            event_id: Id of a condition-bearing event
            detected: Whether the check found a violation

        Returns:
            The updated stored event

        Raises:
            LedgerError: If the id is unknown, the event carries no
                condition readings, or the flag is already set
        """
        current = self.get(event_id)
        if not current.is_condition_bearing:
            raise LedgerError(
                f"Transaction {event_id} is a {current.event_type.value} event; "
                "only transport and receipt events carry a violation flag"
            )
        if current.violation_detected is not None:
            raise LedgerError(f"Violation flag already recorded for transaction {event_id}")

        updated = current.model_copy(update={"violation_detected": bool(detected)})
        self._events[self._positions[event_id]] = updated
        return updated

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize all events as a JSON array (camelCase keys, ISO8601 UTC timestamps)."""
        return json.dumps(
            [event.model_dump(mode="json", by_alias=True) for event in self._events],
            indent=indent,
            ensure_ascii=False,
        )
