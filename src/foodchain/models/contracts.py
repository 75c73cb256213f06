"""Pydantic models for conditions and pricing outcomes."""

from enum import Enum

from pydantic import BaseModel, Field


class ConditionStatus(str, Enum):
    """Verdict of the storage/transport conditions check."""

    MET = "Conditions Met"
    VIOLATION = "Condition Violation"


class PaymentStatus(str, Enum):
    """Verdict of the fair pricing check."""

    RELEASED = "Payment Released"
    QUALITY_PENDING = "Quality Pending"
    DELIVERY_PENDING = "Delivery Pending"
    PENDING = "Pending"


class ConditionResult(BaseModel):
    """Result of checking one event's readings against its thresholds."""

    status: ConditionStatus = Field(description="Met or violation")
    violations: list[str] = Field(
        default_factory=list,
        description="Human-readable violations, temperature before humidity",
    )

    model_config = {"frozen": True}

    @property
    def violated(self) -> bool:
        return bool(self.violations)


class PaymentDecision(BaseModel):
    """Result of evaluating a payment request.

    amount is zero unless status is RELEASED. spoilage_kg is computed from
    ledger history whether or not payment is released.
    """

    status: PaymentStatus = Field(description="Payment verdict")
    amount: float = Field(default=0.0, description="Payable amount")
    spoilage_kg: float = Field(default=0.0, description="Quantity deducted for spoilage")
    adjusted_quantity_kg: float | None = Field(
        default=None,
        description="Quantity paid for (only set when payment is released)",
    )
    has_prior_violation: bool = Field(
        default=False,
        description="Whether the ledger held a flagged violation for the product",
    )

    model_config = {"frozen": True}
