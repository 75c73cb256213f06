"""Typer-based CLI for the food supply chain simulator."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import SimulatorConfig
from .errors import FoodchainError
from .models.contracts import ConditionStatus, PaymentStatus
from .sample_data import SAMPLE_EVENTS
from .scenario import load_scenario
from .simulation import SimulationReport, run_simulation

app = typer.Typer(
    name="foodchain",
    help="Food supply chain ledger simulator - conditions verification and fair pricing",
    add_completion=False,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _outcome_summary(outcome, currency: str) -> tuple[str, str]:
    if outcome.conditions is not None:
        if outcome.conditions.status == ConditionStatus.VIOLATION:
            return f"[red]{outcome.conditions.status.value}[/red]", "; ".join(outcome.conditions.violations)
        return f"[green]{outcome.conditions.status.value}[/green]", ""
    if outcome.payment is not None:
        payment = outcome.payment
        if payment.status == PaymentStatus.RELEASED:
            detail = f"{currency}{payment.amount:,.2f} (spoilage {payment.spoilage_kg:.2f} kg)"
            return f"[green]{payment.status.value}[/green]", detail
        return f"[yellow]{payment.status.value}[/yellow]", ""
    return "[dim]recorded[/dim]", ""


def _print_report(report: SimulationReport, currency: str) -> None:
    table = Table(title=f"Simulation Results ({len(report.outcomes)} event(s))")
    table.add_column("Tx", style="cyan", no_wrap=True)
    table.add_column("Event Type", style="magenta")
    table.add_column("Product", style="yellow")
    table.add_column("Actor", style="dim")
    table.add_column("Outcome")
    table.add_column("Details", style="dim")

    for outcome in report.outcomes:
        status_str, detail_str = _outcome_summary(outcome, currency)
        table.add_row(
            str(outcome.transaction_id),
            outcome.event_type.value,
            outcome.product_id,
            outcome.actor_id,
            status_str,
            detail_str,
        )

    console.print(table)
    console.print()
    console.print(f"[bold]Condition violations:[/bold] {len(report.condition_violations)}")
    console.print(f"[bold]Payment requests:[/bold] {len(report.payments)}")
    console.print(f"[bold]Total released:[/bold] {currency}{report.total_released:,.2f}")


@app.command()
def run(
    scenario: Path = typer.Argument(
        None,
        help="JSON scenario file (default: built-in sample journeys)",
        exists=True,
        dir_okay=False,
    ),
    base_id: int = typer.Option(
        None,
        "--base-id",
        help="Id of the first transaction (default: FOODCHAIN_BASE_ID env or 1001)",
    ),
    spoilage_rate: float = typer.Option(
        None,
        "--spoilage-rate",
        help="Spoilage rate for payment requests that set none (default: 0.15)",
    ),
    show_ledger: bool = typer.Option(
        False,
        "--show-ledger",
        help="Print the final ledger state as JSON after the results",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the report as JSON instead of a table",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Log each append and contract decision",
    ),
):
    """Run events through the ledger and the conditions/pricing contracts.

    Transport and receipt events are checked against their thresholds;
    payment requests are priced with spoilage deducted for products that
    had a violation earlier in the run.
    """
    _configure_logging(verbose)

    try:
        config = SimulatorConfig.from_env()
        if base_id is not None:
            config.base_transaction_id = base_id
        if spoilage_rate is not None:
            config.default_spoilage_rate = spoilage_rate

        records = load_scenario(scenario) if scenario else SAMPLE_EVENTS
        report = run_simulation(records, config=config)
    except FoodchainError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        payload = report.to_dict()
        if show_ledger:
            payload["ledger"] = json.loads(report.ledger.to_json())
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    _print_report(report, config.currency_symbol)

    if show_ledger:
        console.print()
        console.print("[bold]Final ledger state[/bold]")
        console.print_json(report.ledger.to_json())


@app.command()
def sample():
    """Print the built-in sample scenario as JSON (a template for custom scenarios)."""
    typer.echo(json.dumps(SAMPLE_EVENTS, indent=2, ensure_ascii=False))


@app.command()
def version():
    """Show simulator version."""
    from . import __version__
    console.print(f"foodchain v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
