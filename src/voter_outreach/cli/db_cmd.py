"""Database migration CLI commands using Alembic programmatically."""

from pathlib import Path

import typer
from loguru import logger

db_app = typer.Typer()

_INI_OPTION = typer.Option(Path("alembic.ini"), "--ini", help="Path to alembic.ini")


def _alembic_config(ini_path: Path):  # type: ignore[no-untyped-def]
    """Build an Alembic config, failing early when the ini file is missing."""
    from alembic.config import Config

    if not ini_path.is_file():
        typer.echo(f"Alembic config not found: {ini_path}", err=True)
        raise typer.Exit(code=1)
    return Config(str(ini_path))


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    ini_path: Path = _INI_OPTION,
) -> None:
    """Create or migrate the outreach tables up to the target revision."""
    from alembic import command

    config = _alembic_config(ini_path)
    logger.info(f"Upgrading database to {revision}")
    command.upgrade(config, revision)
    logger.info("Database upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    ini_path: Path = _INI_OPTION,
) -> None:
    """Rollback database migration to the target revision."""
    from alembic import command

    config = _alembic_config(ini_path)
    logger.info(f"Downgrading database to {revision}")
    command.downgrade(config, revision)
    logger.info("Database downgrade complete")


@db_app.command()
def current(ini_path: Path = _INI_OPTION) -> None:
    """Show the current database migration revision."""
    from alembic import command

    command.current(_alembic_config(ini_path), verbose=True)
