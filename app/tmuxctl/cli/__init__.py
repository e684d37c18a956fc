"""CLI package for tmuxctl.

This package contains the Typer application and all subcommands.
"""

from tmuxctl.cli.main import app

__all__ = ["app"]
