"""Storage and transport conditions verification."""

import logging

from .ledger import Ledger
from .models.contracts import ConditionResult, ConditionStatus
from .models.ledger import ConditionDetails, LedgerEvent

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    # 30.0 -> "30", 28.1234567 stays exact
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def check_readings(details: ConditionDetails) -> list[str]:
    """Compare readings against thresholds.

    The temperature and humidity checks are independent; both always run.
    Bounds are inclusive, so a reading equal to a bound is acceptable.

    Args:
        details: Parsed condition details

    Returns:
        Violation messages, temperature first (empty when conditions are met)
    """
    thresholds = details.thresholds
    violations = []

    temp = details.current_temp_celsius
    if temp < thresholds.min_temp or temp > thresholds.max_temp:
        violations.append(
            f"Temperature violation: {_fmt(temp)}°C "
            f"(expected {_fmt(thresholds.min_temp)}-{_fmt(thresholds.max_temp)}°C)"
        )

    humidity = details.current_humidity_percent
    if humidity < thresholds.min_humidity or humidity > thresholds.max_humidity:
        violations.append(
            f"Humidity violation: {_fmt(humidity)}% "
            f"(expected {_fmt(thresholds.min_humidity)}-{_fmt(thresholds.max_humidity)}%)"
        )

    return violations


def evaluate_conditions(ledger: Ledger, event: LedgerEvent) -> ConditionResult:
    """Verify an event's storage/transport conditions and flag it on the ledger.

    The violation flag written here is what the pricing check later reads;
    pricing never looks at temperatures itself.

    Args:
        ledger: Ledger holding the event
        event: Stored transport or receipt event

    Returns:
        ConditionResult with status and ordered violation messages

    Raises:
        InvalidEventError: If readings or thresholds are missing or malformed
        LedgerError: If the event is not on the ledger or was already evaluated
    """
    details = event.condition_details()
    violations = check_readings(details)
    status = ConditionStatus.VIOLATION if violations else ConditionStatus.MET

    ledger.mark_violation(event.id, bool(violations))

    prefix = f"Conditions for product {event.product_id} at {event.location}: {status.value}."
    if violations:
        logger.warning(f"{prefix} Violations: {', '.join(violations)}")
    else:
        logger.info(
            f"{prefix} Current temp: {_fmt(details.current_temp_celsius)}°C, "
            f"humidity: {_fmt(details.current_humidity_percent)}%"
        )

    if details.delay_hours is not None:
        logger.info(
            f"Transport delay: {_fmt(details.delay_hours)} hours. "
            f"Reason: {details.delay_reason or 'Not specified'}"
        )
    if details.weather_condition:
        logger.info(f"External condition reported: {details.weather_condition}")
    if details.estimated_spoilage_percent is not None:
        logger.info(f"Estimated spoilage: {_fmt(details.estimated_spoilage_percent)}%")

    return ConditionResult(status=status, violations=violations)
