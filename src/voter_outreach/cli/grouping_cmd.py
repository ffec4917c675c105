"""CLI commands for rebuilding and inspecting precinct groupings."""

import asyncio

import typer

from voter_outreach.services.grouping_service import GroupingSummary

grouping_app = typer.Typer()


@grouping_app.command("rebuild")
def rebuild() -> None:
    """Recompute target precinct groupings from the imported data."""
    summary = asyncio.run(_rebuild())
    typer.echo(f"Triggering districts:  {len(summary.target_districts)}")
    typer.echo(f"Contested districts:   {len(summary.candidate_districts)}")
    typer.echo(f"Targeted precincts:    {summary.precinct_count}")
    typer.echo(f"Groupings:             {summary.group_count}")


async def _rebuild() -> GroupingSummary:
    """Async implementation of rebuild."""
    from voter_outreach.core.config import get_settings
    from voter_outreach.core.database import dispose_engine, get_session_factory, init_engine
    from voter_outreach.services.grouping_service import rebuild_groupings

    settings = get_settings()
    init_engine(settings.database_url)

    try:
        factory = get_session_factory()
        async with factory() as session:
            return await rebuild_groupings(session, hash_length=settings.grouping_hash_length)
    finally:
        await dispose_engine()


@grouping_app.command("list")
def list_cmd() -> None:
    """List groupings and their contested districts."""
    groupings = asyncio.run(_list())
    if not groupings:
        typer.echo("No groupings found. Run 'groupings rebuild' first.")
        return
    for grouping_hash, districts in groupings:
        typer.echo(f"{grouping_hash}  {', '.join(districts) or '(none)'}")


async def _list() -> list[tuple[str, list[str]]]:
    """Async implementation of list."""
    from voter_outreach.core.config import get_settings
    from voter_outreach.core.database import dispose_engine, get_session_factory, init_engine
    from voter_outreach.services.grouping_service import list_groupings

    settings = get_settings()
    init_engine(settings.database_url)

    try:
        factory = get_session_factory()
        async with factory() as session:
            return await list_groupings(session)
    finally:
        await dispose_engine()
