"""CLI commands for per-candidate expenditure reporting."""

import asyncio
import json

import typer

from voter_outreach.lib.composer import CandidateExpenditure

expenditure_app = typer.Typer()


@expenditure_app.command("show")
def show(
    batch: str = typer.Option("", "--batch", help="Batch identifier to aggregate"),
    as_json: bool = typer.Option(False, "--json", help="Print the aggregate as JSON"),
) -> None:
    """Show each candidate's share of a batch's message costs."""
    expenditures = asyncio.run(_show(batch))
    if as_json:
        payload = {
            name: {
                "office": entry.office,
                "total_expenditures": entry.total_expenditures,
                "expenditures": entry.expenditures,
            }
            for name, entry in expenditures.items()
        }
        typer.echo(json.dumps(payload, indent=2))
        return
    if not expenditures:
        typer.echo(f"No expenditures for batch '{batch}'.")
        return
    for name, entry in expenditures.items():
        typer.echo(f"{name} ({entry.office}): {entry.total_expenditures:.2f} across {len(entry.expenditures)} groupings")


async def _show(batch_id: str) -> dict[str, CandidateExpenditure]:
    """Async implementation of show."""
    from voter_outreach.core.config import get_settings
    from voter_outreach.core.database import dispose_engine, get_session_factory, init_engine
    from voter_outreach.services.expenditure_service import aggregate_expenditures

    settings = get_settings()
    init_engine(settings.database_url)

    try:
        factory = get_session_factory()
        async with factory() as session:
            return await aggregate_expenditures(session, batch_id)
    finally:
        await dispose_engine()
