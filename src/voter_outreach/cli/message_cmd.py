"""CLI commands for generating, listing and exporting outreach messages."""

import asyncio
from pathlib import Path

import typer

from voter_outreach.lib.exporter import MessageExportResult
from voter_outreach.services.message_service import GenerationResult

message_app = typer.Typer()


@message_app.command("generate")
def generate(
    batch: str = typer.Option("", "--batch", help="Batch identifier; existing rows of the batch are replaced"),
) -> None:
    """Generate one message per grouping for a batch."""
    result = asyncio.run(_generate(batch))
    typer.echo(f"Batch '{result.batch_id}': {len(result.messages)} messages generated")
    if result.failed:
        for grouping_hash, error in result.failed.items():
            typer.echo(f"  FAILED {grouping_hash}: {error}", err=True)
        raise typer.Exit(code=1)


async def _generate(batch_id: str) -> GenerationResult:
    """Async implementation of generate."""
    from voter_outreach.core.config import get_settings
    from voter_outreach.core.database import dispose_engine, get_session_factory, init_engine
    from voter_outreach.services.message_service import generate_messages

    settings = get_settings()
    init_engine(settings.database_url)

    try:
        factory = get_session_factory()
        async with factory() as session:
            return await generate_messages(
                session,
                batch_id,
                cost_per_recipient=settings.cost_per_recipient,
                txt_template=settings.txt_template,
                listing_template=settings.listing_template,
            )
    finally:
        await dispose_engine()


@message_app.command("list")
def list_cmd(
    batch: str | None = typer.Option(None, "--batch", help="Only show this batch"),
) -> None:
    """List stored messages with recipient counts and costs."""
    rows = asyncio.run(_list(batch))
    if not rows:
        typer.echo("No messages found.")
        return
    for batch_id, grouping_hash, num_candidates, num_recipients, total_cost in rows:
        typer.echo(
            f"[{batch_id}] {grouping_hash}  candidates={num_candidates}  "
            f"recipients={num_recipients}  total_cost={total_cost:.2f}"
        )


async def _list(batch_id: str | None) -> list[tuple[str, str, int, int, float]]:
    """Async implementation of list."""
    from voter_outreach.core.config import get_settings
    from voter_outreach.core.database import dispose_engine, get_session_factory, init_engine
    from voter_outreach.services.message_service import list_messages

    settings = get_settings()
    init_engine(settings.database_url)

    try:
        factory = get_session_factory()
        async with factory() as session:
            messages = await list_messages(session, batch_id)
            return [
                (m.batch_id, m.grouping_hash, m.num_candidates, m.num_recipients, m.total_cost) for m in messages
            ]
    finally:
        await dispose_engine()


@message_app.command("export")
def export(
    batch: str = typer.Option("", "--batch", help="Batch identifier to export"),
    output: Path | None = typer.Option(None, "--output", help="Output directory"),
) -> None:
    """Export a batch's messages, recipient lists and expenditures to CSV."""
    result = asyncio.run(_export(batch, output))
    typer.echo(f"Messages:        {result.message_count} -> {result.messages_path}")
    typer.echo(f"Recipient files: {len(result.recipient_paths)}")
    typer.echo(f"Candidates:      {result.candidate_count} -> {result.expenditures_path}")


async def _export(batch_id: str, output_dir: Path | None) -> MessageExportResult:
    """Async implementation of export."""
    from voter_outreach.core.config import get_settings
    from voter_outreach.core.database import dispose_engine, get_session_factory, init_engine
    from voter_outreach.services.export_service import export_messages

    settings = get_settings()
    init_engine(settings.database_url)

    export_dir = output_dir or Path(settings.export_dir)

    try:
        factory = get_session_factory()
        async with factory() as session:
            return await export_messages(session, export_dir, batch_id)
    finally:
        await dispose_engine()
