"""CLI commands for tmuxctl.

This package contains all subcommand implementations.
"""

from tmuxctl.cli.commands import config, install, status, uninstall

__all__ = ["config", "install", "status", "uninstall"]
