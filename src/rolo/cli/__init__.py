"""Command line interface for rolo."""

from rolo.cli.app import create_app, resolve_width
from rolo.cli.main import main

__all__ = ["create_app", "main", "resolve_width"]
