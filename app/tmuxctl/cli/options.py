"""Option types shared by CLI commands."""

from pathlib import Path
from typing import Annotated

import typer

from tmuxctl.core.config import InstallerConfig, load_config
from tmuxctl.core.state import StateManager

StateFileOption = Annotated[
    Path | None,
    typer.Option(
        "--state-file",
        "-s",
        help="Install state file (default: from config, else XDG state dir).",
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Config file (default: ~/.config/tmuxctl/config.toml).",
    ),
]

DryRunOption = Annotated[
    bool,
    typer.Option(
        "--dry-run",
        "-n",
        help="Show what would be done without making changes.",
    ),
]


def resolve(
    config_path: Path | None, state_file: Path | None
) -> tuple[InstallerConfig, StateManager]:
    """Load the config and build the state manager for a command.

    An explicit --state-file wins over the config's state_file.

    Raises:
        ConfigError: If the config file is invalid.
    """
    config = load_config(config_path)
    path = state_file.expanduser() if state_file is not None else config.effective_state_file
    return config, StateManager(state_file=path)
