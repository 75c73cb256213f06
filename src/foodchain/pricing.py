"""Fair pricing: payment release with spoilage deduction."""

import logging

from .config import DEFAULT_SPOILAGE_RATE
from .ledger import Ledger
from .models.contracts import PaymentDecision, PaymentStatus
from .models.ledger import LedgerEvent

logger = logging.getLogger(__name__)


def evaluate_pricing(
    ledger: Ledger,
    event: LedgerEvent,
    default_spoilage_rate: float = DEFAULT_SPOILAGE_RATE,
) -> PaymentDecision:
    """Decide whether to release payment for a payment request.

    Spoilage is deducted when the ledger already holds a flagged conditions
    violation for the same product. Only violations recorded before this call
    are seen. Results are not clamped: a spoilage rate above 1.0 yields a
    negative payable quantity.

    Args:
        ledger: Ledger to consult for prior violations
        event: Stored PAYMENT_REQUEST event
        default_spoilage_rate: Rate used when the request carries none

    Returns:
        PaymentDecision; amount is 0 unless quality and delivery are both confirmed

    Raises:
        InvalidEventError: If the event is not a payment request or quantity,
            price or confirmation flags are missing or malformed
    """
    details = event.payment_details()

    prior_violations = ledger.find_by_product_with_violation(event.product_id)
    has_prior_violation = len(prior_violations) > 0

    spoilage_rate = (
        details.spoilage_rate if details.spoilage_rate is not None else default_spoilage_rate
    )
    spoilage_kg = spoilage_rate * details.quantity_kg if has_prior_violation else 0.0

    if details.quality_verified and details.delivery_confirmed:
        adjusted_quantity_kg = details.quantity_kg - spoilage_kg
        total_payment = adjusted_quantity_kg * details.agreed_price_per_kg

        logger.info(
            f"Violation found for product {event.product_id}: "
            f"{'Yes' if has_prior_violation else 'No'}"
        )
        logger.info(
            f"Payment released for product {event.product_id}. "
            f"Spoilage: {spoilage_kg:.2f} kg. Amount: {total_payment:.2f}"
        )
        return PaymentDecision(
            status=PaymentStatus.RELEASED,
            amount=total_payment,
            spoilage_kg=spoilage_kg,
            adjusted_quantity_kg=adjusted_quantity_kg,
            has_prior_violation=has_prior_violation,
        )

    if not details.quality_verified:
        logger.info(f"Payment pending for product {event.product_id}: quality not yet verified")
        status = PaymentStatus.QUALITY_PENDING
    elif not details.delivery_confirmed:
        logger.info(f"Payment pending for product {event.product_id}: delivery not yet confirmed")
        status = PaymentStatus.DELIVERY_PENDING
    else:
        status = PaymentStatus.PENDING

    return PaymentDecision(
        status=status,
        amount=0.0,
        spoilage_kg=spoilage_kg,
        has_prior_violation=has_prior_violation,
    )
