"""Scenario loading from JSON files."""

import json
from pathlib import Path

from .errors import InvalidEventError
from .models.ledger import EventInput


def load_scenario(path: Path) -> list[EventInput]:
    """Load event inputs from a JSON scenario file.

    The file holds either a list of event records or an object with an
    "events" list. Records use the same shape as the built-in sample
    (eventType, actorId, productId, location, details).

    Args:
        path: Path to the scenario file

    Returns:
        Event inputs in file order

    Raises:
        InvalidEventError: If the file cannot be parsed or a record lacks
            envelope fields
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidEventError(f"Could not read scenario {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("events")
    if not isinstance(data, list):
        raise InvalidEventError(
            f"Scenario {path} must be a list of events or an object with an 'events' list",
            field="events",
        )

    inputs = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise InvalidEventError(f"Scenario {path}: event #{index} is not an object")
        try:
            inputs.append(EventInput.from_record(record))
        except InvalidEventError as e:
            raise InvalidEventError(f"Scenario {path}: event #{index}: {e}", field=e.field) from e
    return inputs
