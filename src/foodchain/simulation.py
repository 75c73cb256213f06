"""Simulation driver: feeds events through the ledger and contracts in order."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, Field

from .conditions import evaluate_conditions
from .config import SimulatorConfig
from .ledger import Ledger
from .models.contracts import ConditionResult, PaymentDecision
from .models.ledger import EventInput, EventType, LedgerEvent
from .pricing import evaluate_pricing

logger = logging.getLogger(__name__)


class EventOutcome(BaseModel):
    """What happened to one event during a run."""

    transaction_id: int
    event_type: EventType
    product_id: str
    actor_id: str
    contract: Literal["conditions", "pricing"] | None = Field(
        default=None,
        description="Contract invoked for the event, None when none applies",
    )
    conditions: ConditionResult | None = None
    payment: PaymentDecision | None = None


@dataclass
class SimulationReport:
    """Outcomes of a run plus the ledger it produced."""

    ledger: Ledger
    outcomes: list[EventOutcome] = field(default_factory=list)

    @property
    def condition_violations(self) -> list[EventOutcome]:
        return [o for o in self.outcomes if o.conditions is not None and o.conditions.violated]

    @property
    def payments(self) -> list[EventOutcome]:
        return [o for o in self.outcomes if o.payment is not None]

    @property
    def total_released(self) -> float:
        return sum(o.payment.amount for o in self.payments)

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcomes": [o.model_dump(mode="json") for o in self.outcomes],
            "totalReleased": self.total_released,
        }


def process_event(
    ledger: Ledger,
    record: EventInput | dict[str, Any],
    config: SimulatorConfig | None = None,
) -> EventOutcome:
    """Append one event and invoke the contract matching its type.

    Payment requests go to pricing. Transport and receipt events go to the
    conditions check when they carry readings and thresholds. Anything else
    is only recorded.
    """
    config = config or SimulatorConfig()
    event = ledger.append(record)
    outcome = EventOutcome(
        transaction_id=event.id,
        event_type=event.event_type,
        product_id=event.product_id,
        actor_id=event.actor_id,
    )

    if event.event_type == EventType.PAYMENT_REQUEST:
        logger.info(f"Invoking fair pricing contract for transaction {event.id}")
        outcome.contract = "pricing"
        outcome.payment = evaluate_pricing(
            ledger, event, default_spoilage_rate=config.default_spoilage_rate
        )
    elif _wants_conditions_check(event):
        logger.info(f"Invoking conditions verification contract for transaction {event.id}")
        outcome.contract = "conditions"
        outcome.conditions = evaluate_conditions(ledger, event)

    return outcome


def _wants_conditions_check(event: LedgerEvent) -> bool:
    return event.is_condition_bearing and event.has_condition_readings()


def run_simulation(
    records: Iterable[EventInput | dict[str, Any]],
    ledger: Ledger | None = None,
    config: SimulatorConfig | None = None,
) -> SimulationReport:
    """Run a sequence of events through the simulator.

    Events are processed strictly in order, so a payment request only sees
    violations recorded by earlier events.

    Args:
        records: Event inputs in the order they occur
        ledger: Ledger to append to (default: a fresh one per config)
        config: Simulator configuration (default: SimulatorConfig())

    Returns:
        SimulationReport with one outcome per input

    Raises:
        InvalidEventError: If an event is malformed; processing stops there
    """
    config = config or SimulatorConfig()
    if ledger is None:
        ledger = Ledger(base_id=config.base_transaction_id)

    report = SimulationReport(ledger=ledger)
    logger.info("Starting food supply chain simulation")

    for record in records:
        report.outcomes.append(process_event(ledger, record, config))

    logger.info(
        f"Simulation complete: {len(report.outcomes)} events, "
        f"{len(report.condition_violations)} condition violations, "
        f"{len(report.payments)} payment requests"
    )
    return report
