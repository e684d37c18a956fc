"""Config commands.

Provides commands to show the effective installer configuration and to
write a default config file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from tmuxctl.cli.options import ConfigOption
from tmuxctl.core.config import InstallerConfig, config_to_dict, load_config, save_config
from tmuxctl.core.errors import TmuxctlError
from tmuxctl.core.paths import get_config_path
from tmuxctl.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or create the installer configuration.",
    no_args_is_help=True,
)


@app.command()
def show(config_path: ConfigOption = None) -> None:
    """Print the effective configuration as TOML."""
    try:
        config = load_config(config_path)
    except TmuxctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    data = config_to_dict(config)
    data["state_file"] = str(config.effective_state_file)
    console.print(tomli_w.dumps(data), markup=False, highlight=False)


@app.command()
def init(
    config_path: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    path: Path = config_path or get_config_path()

    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(InstallerConfig(), path)
    except TmuxctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    print_success(f"Wrote {saved}")
