"""Flask CLI commands for managing the exercise catalog."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from exercise_library.api.deps import EXERCISE_SERVICE_KEY
from exercise_library.core.config import STORE_MEMORY
from exercise_library.core.extensions import db
from exercise_library.seeds import seed_data

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Raise logging verbosity for seed modules when requested."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(seed_data.__name__).setLevel(level)
    LOGGER.setLevel(level)


def _echo_summary(summary: dict[str, dict[str, int]]) -> None:
    """Pretty-print a tabular summary of seed results."""
    click.echo("Seed summary:")
    if not summary:
        click.echo("  (no changes)")
        return
    width = max(len(name) for name in summary)
    for table, counters in sorted(summary.items()):
        created = counters.get("created", 0)
        existing = counters.get("existing", 0)
        click.echo(f"  {table.ljust(width)}  created={created:>2}  existing={existing:>2}")


@click.group("catalog")
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def catalog_cli(ctx: click.Context, verbose: bool) -> None:
    """Exercise catalog maintenance commands."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@catalog_cli.command("init-db")
@with_appcontext
def init_db_command() -> None:
    """Create the catalog tables without running migrations."""
    if current_app.config.get("EXERCISE_STORE") == STORE_MEMORY:
        click.echo("In-memory store configured; nothing to create.")
        return
    db.create_all()
    click.echo("Catalog tables created.")


@catalog_cli.command("seed")
@click.pass_context
@with_appcontext
def seed_command(ctx: click.Context) -> None:
    """Add the starter exercises that are not in the catalog yet."""
    verbose = bool(ctx.obj.get("verbose", False))
    service = current_app.extensions[EXERCISE_SERVICE_KEY]
    try:
        summary = seed_data.run_all(service, verbose=verbose)
    except Exception as exc:
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    _echo_summary(summary)
