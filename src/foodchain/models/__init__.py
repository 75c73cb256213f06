"""Pydantic models for the supply chain simulator."""

from .contracts import (
    ConditionResult,
    ConditionStatus,
    PaymentDecision,
    PaymentStatus,
)
from .ledger import (
    CONDITION_EVENT_TYPES,
    ConditionDetails,
    EventInput,
    EventType,
    LedgerEvent,
    PaymentDetails,
    Thresholds,
)

__all__ = [
    # Ledger
    "CONDITION_EVENT_TYPES",
    "EventType",
    "EventInput",
    "LedgerEvent",
    "Thresholds",
    "ConditionDetails",
    "PaymentDetails",
    # Contracts
    "ConditionStatus",
    "ConditionResult",
    "PaymentStatus",
    "PaymentDecision",
]
