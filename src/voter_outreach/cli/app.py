"""Typer CLI root application."""

import typer

from voter_outreach.core.config import get_settings
from voter_outreach.core.logging import setup_logging

app = typer.Typer(name="voter-outreach", help="Precinct grouping and outreach message generation CLI")


@app.callback()
def _main_callback() -> None:
    """Validate configuration and initialize logging for all CLI commands."""
    try:
        settings = get_settings()
    except ValueError as exc:  # pydantic ValidationError or a malformed config.json
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from voter_outreach.cli.db_cmd import db_app
    from voter_outreach.cli.expenditure_cmd import expenditure_app
    from voter_outreach.cli.grouping_cmd import grouping_app
    from voter_outreach.cli.message_cmd import message_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(grouping_app, name="groupings", help="Precinct grouping commands")
    app.add_typer(message_app, name="messages", help="Message generation and export commands")
    app.add_typer(expenditure_app, name="expenditures", help="Candidate expenditure commands")


_register_subcommands()
