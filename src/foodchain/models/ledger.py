"""Pydantic models for ledger events and their detail payloads."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, TypeVar

from pydantic import AllowInfNan, BaseModel, BeforeValidator, Field, Strict, ValidationError

from ..errors import InvalidEventError


class EventType(str, Enum):
    """Supply chain occurrences recorded on the ledger."""

    HARVEST = "HARVEST"
    PROCESS = "PROCESS"
    TRANSPORT = "TRANSPORT"
    WAREHOUSE_RECEIPT = "WAREHOUSE_RECEIPT"
    RETAIL_RECEIPT = "RETAIL_RECEIPT"
    PAYMENT_REQUEST = "PAYMENT_REQUEST"


# Event types whose details carry temperature/humidity readings
CONDITION_EVENT_TYPES = frozenset(
    {
        EventType.TRANSPORT,
        EventType.WAREHOUSE_RECEIPT,
        EventType.RETAIL_RECEIPT,
    }
)


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass, so strict float alone would take True as 1.0
    if isinstance(value, bool):
        raise ValueError("Input should be a number, not a boolean")
    return value


# Finite real number: ints and floats only, no numeric strings, bools, NaN or inf
Measure = Annotated[float, Strict(), AllowInfNan(False), BeforeValidator(_reject_bool)]

# Confirmation flag: true/false only, no 0/1 or "yes"
Flag = Annotated[bool, Strict()]

_DETAILS_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "extra": "ignore",
    "allow_inf_nan": False,
}


class Thresholds(BaseModel):
    """Acceptable temperature and humidity ranges (inclusive bounds)."""

    min_temp: Measure = Field(alias="minTemp", description="Lowest acceptable temperature (°C)")
    max_temp: Measure = Field(alias="maxTemp", description="Highest acceptable temperature (°C)")
    min_humidity: Measure = Field(alias="minHumidity", description="Lowest acceptable humidity (%)")
    max_humidity: Measure = Field(alias="maxHumidity", description="Highest acceptable humidity (%)")

    model_config = _DETAILS_CONFIG


class ConditionDetails(BaseModel):
    """Details of a transport, warehouse or retail receipt event.

    Only the readings and thresholds drive the conditions check; the
    delay/weather/spoilage fields are context for the log.
    """

    current_temp_celsius: Measure = Field(alias="currentTempCelsius")
    current_humidity_percent: Measure = Field(alias="currentHumidityPercent")
    thresholds: Thresholds
    delay_hours: Measure | None = Field(default=None, alias="delayHours")
    delay_reason: str | None = Field(default=None, alias="delayReason")
    weather_condition: str | None = Field(default=None, alias="weatherCondition")
    estimated_spoilage_percent: Measure | None = Field(default=None, alias="estimatedSpoilagePercent")

    model_config = _DETAILS_CONFIG


class PaymentDetails(BaseModel):
    """Details of a payment request event."""

    quality_verified: Flag = Field(alias="qualityVerified")
    delivery_confirmed: Flag = Field(alias="deliveryConfirmed")
    quantity_kg: Measure = Field(alias="quantityKg")
    agreed_price_per_kg: Measure = Field(alias="agreedPricePerKg")
    spoilage_rate: Measure | None = Field(
        default=None,
        alias="spoilageRate",
        description="Fraction of quantity deducted when the product has violations; "
        "None means the evaluator's default",
    )
    buyer_id: str | None = Field(default=None, alias="buyerId")

    model_config = _DETAILS_CONFIG


_DetailsT = TypeVar("_DetailsT", bound=BaseModel)


def _first_error_field(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "details"
    return ".".join(str(part) for part in errors[0]["loc"]) or "details"


class EventInput(BaseModel):
    """A partially filled event record, before the ledger assigns id and time.

    Accepts the camelCase keys used in scenario JSON as well as field names.
    """

    event_type: EventType = Field(alias="eventType")
    actor_id: str = Field(alias="actorId")
    product_id: str = Field(alias="productId")
    location: str = Field(default="")
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "EventInput":
        """Build an input from a plain dict, raising InvalidEventError on bad envelopes."""
        try:
            return cls.model_validate(record)
        except ValidationError as e:
            field = _first_error_field(e)
            raise InvalidEventError(
                f"Invalid event record: field '{field}' is missing or malformed",
                field=field,
            ) from e


class LedgerEvent(BaseModel):
    """A stored ledger entry.

    Frozen: the only field that ever changes is violation_detected, and only
    through Ledger.mark_violation, which stores a replacement copy.
    """

    id: int = Field(description="Transaction id assigned by the ledger")
    actor_id: str = Field(alias="actorId")
    product_id: str = Field(alias="productId")
    timestamp: datetime = Field(description="Insertion time (UTC)")
    location: str = Field(default="")
    event_type: EventType = Field(alias="eventType")
    details: dict[str, Any] = Field(default_factory=dict)
    violation_detected: bool | None = Field(
        default=None,
        alias="violationDetected",
        description="Set by the conditions check; None until evaluated",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_condition_bearing(self) -> bool:
        return self.event_type in CONDITION_EVENT_TYPES

    def has_condition_readings(self) -> bool:
        """Whether details carry temperature, humidity and thresholds."""
        return all(
            self.details.get(alias) is not None or self.details.get(name) is not None
            for alias, name in (
                ("currentTempCelsius", "current_temp_celsius"),
                ("currentHumidityPercent", "current_humidity_percent"),
                ("thresholds", "thresholds"),
            )
        )

    def condition_details(self) -> ConditionDetails:
        """Parse details as a condition-bearing payload.

        Raises:
            InvalidEventError: If the event type carries no readings or a
                required field is missing or not numeric
        """
        if not self.is_condition_bearing:
            raise InvalidEventError(
                f"Transaction {self.id} is a {self.event_type.value} event and carries no condition readings",
                field="eventType",
                event_id=self.id,
            )
        return self._parse_details(ConditionDetails)

    def payment_details(self) -> PaymentDetails:
        """Parse details as a payment request payload.

        Raises:
            InvalidEventError: If this is not a PAYMENT_REQUEST or a required
                field is missing or not numeric
        """
        if self.event_type != EventType.PAYMENT_REQUEST:
            raise InvalidEventError(
                f"Transaction {self.id} is a {self.event_type.value} event, not a payment request",
                field="eventType",
                event_id=self.id,
            )
        return self._parse_details(PaymentDetails)

    def _parse_details(self, model: type[_DetailsT]) -> _DetailsT:
        try:
            return model.model_validate(self.details)
        except ValidationError as e:
            field = _first_error_field(e)
            raise InvalidEventError(
                f"Transaction {self.id} ({self.event_type.value}): "
                f"details field '{field}' is missing or malformed",
                field=field,
                event_id=self.id,
            ) from e
