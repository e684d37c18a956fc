"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from tmuxctl import __version__
from tmuxctl.cli.commands import config, install, status, uninstall
from tmuxctl.utils.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="tmuxctl",
    help="Idempotent installer and uninstaller for a tmux setup.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tmuxctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
) -> None:
    """tmuxctl - install tmux with a ready-made configuration, and undo it.

    Everything `install` changes is recorded, and `uninstall` reverses
    exactly those changes.
    """
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.add_typer(install.app, name="install")
app.add_typer(uninstall.app, name="uninstall")
app.add_typer(status.app, name="status")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
