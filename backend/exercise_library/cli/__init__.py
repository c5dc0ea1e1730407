"""Command-line interface registration for the Flask application."""

from __future__ import annotations

from flask import Flask

from .catalog import catalog_cli


def init_app(app: Flask) -> None:
    """Register the ``flask catalog`` command group on ``app``."""
    app.cli.add_command(catalog_cli)
