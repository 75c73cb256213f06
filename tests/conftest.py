"""Pytest fixtures for supply chain simulator tests."""

import pytest

from foodchain.ledger import Ledger
from foodchain.models.ledger import EventInput


@pytest.fixture
def ledger():
    """Create an empty ledger with the default base id.

    Returns:
        Ledger instance
    """
    return Ledger()


@pytest.fixture
def harvest_input():
    """HARVEST record for the tomato batch."""
    return EventInput(
        event_type="HARVEST",
        actor_id="farmer_001",
        product_id="TOMATO_BATCH_001",
        location="Kano Farm Plot A",
        details={"cropType": "Tomato", "quantityKg": 500},
    )


@pytest.fixture
def make_transport():
    """Factory for TRANSPORT records with given readings and ranges.

    Returns:
        Callable building an EventInput
    """

    def _make(
        temp: float,
        humidity: float,
        temp_range: tuple[float, float] = (20, 28),
        humidity_range: tuple[float, float] = (40, 60),
        product_id: str = "TOMATO_BATCH_001",
        event_type: str = "TRANSPORT",
    ) -> EventInput:
        return EventInput(
            event_type=event_type,
            actor_id="logistics_NGR_002",
            product_id=product_id,
            location="En route to Abuja Retailer",
            details={
                "vehicleId": "VAN_B456",
                "currentTempCelsius": temp,
                "currentHumidityPercent": humidity,
                "thresholds": {
                    "minTemp": temp_range[0],
                    "maxTemp": temp_range[1],
                    "minHumidity": humidity_range[0],
                    "maxHumidity": humidity_range[1],
                },
            },
        )

    return _make


@pytest.fixture
def make_payment():
    """Factory for PAYMENT_REQUEST records.

    Returns:
        Callable building an EventInput
    """

    def _make(
        quantity_kg: float = 500,
        price_per_kg: float = 350,
        quality_verified: bool = True,
        delivery_confirmed: bool = True,
        spoilage_rate: float | None = 0.15,
        product_id: str = "TOMATO_BATCH_001",
    ) -> EventInput:
        details = {
            "buyerId": "processor_NGR_001",
            "quantityKg": quantity_kg,
            "agreedPricePerKg": price_per_kg,
            "qualityVerified": quality_verified,
            "deliveryConfirmed": delivery_confirmed,
        }
        if spoilage_rate is not None:
            details["spoilageRate"] = spoilage_rate
        return EventInput(
            event_type="PAYMENT_REQUEST",
            actor_id="farmer_001",
            product_id=product_id,
            location="Kano Farm Office",
            details=details,
        )

    return _make
