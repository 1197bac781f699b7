"""Cash-flow CLI application using Typer.

Renders the cash-flow graph of a transaction file in the terminal and
serves the HTTP API.
"""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from cashflow.application.dtos.analytics import CashFlowData
from cashflow.application.queries import CashFlowQuery
from cashflow.domain.cashflow import CashFlowGraphBuilder
from cashflow.domain.shared.exceptions import DomainException
from cashflow.infrastructure.importers import load_transactions
from cashflow.infrastructure.persistence.memory import InMemoryRepositoryFactory
from cashflow.presentation.api.app import run as run_api
from cashflow.presentation.api.schemas import CashFlowResponse
from cashflow_config.settings import get_settings

app = typer.Typer(
    name="cashflow",
    help="Cash-flow graph CLI",
    no_args_is_help=True,
)
console = Console()


def _render(data: CashFlowData) -> None:
    console.print(
        f"\n[bold]Cash flow[/bold] {data.period} "
        f"[dim]({data.level.value})[/dim]",
    )
    console.print(
        f"Income [green]{data.total_income}[/green]  "
        f"Expenses [red]{data.total_expenses}[/red]  "
        f"Net [bold]{data.net_savings}[/bold]\n",
    )

    if not data.nodes:
        console.print("[yellow]No data to show for this period.[/yellow]")
        return

    nodes = Table(title="Nodes", show_lines=False)
    nodes.add_column("Col", justify="right")
    nodes.add_column("Id", style="cyan")
    nodes.add_column("Label")
    nodes.add_column("Amount", justify="right")
    nodes.add_column("", justify="center")
    for node in sorted(data.nodes, key=lambda n: (n.level, -n.amount)):
        marker = ""
        if node.has_children:
            marker = "−" if node.id in data.expanded else "+"
        nodes.add_row(str(node.level), node.id, node.label, f"{node.amount:.2f}", marker)
    console.print(nodes)

    links = Table(title="Links")
    links.add_column("Source", style="cyan")
    links.add_column("Target", style="cyan")
    links.add_column("Value", justify="right")
    for link in data.links:
        links.add_row(link.source, link.target, f"{link.value:.2f}")
    console.print(links)


@app.command("show")
def show(  # NOQA: PLR0913
    file: Path = typer.Argument(..., help="Transactions file (.json or .csv)"),
    period: Optional[str] = typer.Option(
        None,
        "--period",
        "-p",
        help="YYYY-MM, YYYY-Q#, YYYY-S# or YYYY (default: current month)",
    ),
    date_from: Optional[datetime] = typer.Option(
        None,
        "--from",
        formats=["%Y-%m-%d"],
        help="Start date, used together with --to",
    ),
    date_to: Optional[datetime] = typer.Option(
        None,
        "--to",
        formats=["%Y-%m-%d"],
        help="End date (inclusive)",
    ),
    level: Optional[str] = typer.Option(
        None,
        "--level",
        "-l",
        help="major or category (default: CASHFLOW_DEFAULT_LEVEL)",
    ),
    expand: Optional[List[str]] = typer.Option(
        None,
        "--expand",
        "-e",
        help="Node id to expand (repeatable)",
    ),
    expand_all: bool = typer.Option(False, "--expand-all", help="Expand every node"),
    origin: Optional[str] = typer.Option(None, help="Origin filter"),
    bank: Optional[str] = typer.Option(None, help="Bank filter"),
    major_category: Optional[str] = typer.Option(None, help="Major category filter"),
    category: Optional[str] = typer.Option(None, help="Category filter"),
    savings: Optional[bool] = typer.Option(
        None,
        "--savings/--no-savings",
        help="Add a savings node when income exceeds expenses",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
) -> None:
    """Show the cash-flow graph of a transaction file."""
    settings = get_settings()
    include_savings = settings.show_savings_node if savings is None else savings

    try:
        factory = InMemoryRepositoryFactory(load_transactions(file))
        query = CashFlowQuery(
            factory.transaction_read_port(),
            graph_builder=CashFlowGraphBuilder(
                budget_label=settings.budget_label,
                include_savings=include_savings,
            ),
            validate_graph_shape=settings.validate_graph_shape,
        )
        # The visible graph is computed even without --expand: collapsed view
        result = asyncio.run(
            query.execute(
                period=period,
                date_from=date_from.date() if date_from else None,
                date_to=date_to.date() if date_to else None,
                level=level or settings.default_level,
                origin=origin,
                bank=bank,
                major_category=major_category,
                category=category,
                expanded=expand or [],
                expand_all=expand_all,
            ),
        )
    except DomainException as exc:
        console.print(f"[red]Error:[/red] {exc.message}", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(CashFlowResponse.from_dto(result).model_dump_json(by_alias=True, indent=2))
        return
    _render(result)


@app.command("serve")
def serve() -> None:
    """Run the HTTP API (host/port from CASHFLOW_API_HOST / CASHFLOW_API_PORT)."""
    run_api()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
