"""Install command.

This module provides the `tmuxctl install` command which installs the
required packages, writes the tmux configuration and sets up plugins.
"""

import subprocess
from typing import Annotated

import typer

from tmuxctl.cli.display import print_install_summary
from tmuxctl.cli.options import ConfigOption, DryRunOption, StateFileOption, resolve
from tmuxctl.core.errors import PackageManagerNotFoundError, TmuxctlError
from tmuxctl.core.installer import Installer
from tmuxctl.core.paths import get_uninstall_script_path
from tmuxctl.core.uninstall_script import write_uninstall_script
from tmuxctl.operators.detect import detect_operator
from tmuxctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    name="install",
    help="Install and configure tmux.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def install(
    ctx: typer.Context,
    dry_run: DryRunOption = False,
    state_file: StateFileOption = None,
    config_path: ConfigOption = None,
    no_script: Annotated[
        bool,
        typer.Option(
            "--no-script",
            help="Do not write the uninstall script.",
        ),
    ] = False,
) -> None:
    """Install tmux, its configuration and plugins.

    Missing packages are installed with the host package manager,
    the tmux-256color terminfo entry is compiled if absent, ~/.tmux.conf
    is (re)written, and TPM is cloned and its plugins installed. Every
    change is recorded so `tmuxctl uninstall` can reverse it.

    Examples:
        tmuxctl install              # Install everything
        tmuxctl install --dry-run    # Preview only
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config, state = resolve(config_path, state_file)

        operator = detect_operator(dry_run=dry_run)
        if operator is None:
            raise PackageManagerNotFoundError(
                "Could not identify a supported package manager. Aborting."
            )
        print_info(f"Using package manager: {operator.kind.value}")

        report = Installer(config, state, operator, dry_run=dry_run).run()
    except TmuxctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except (OSError, RuntimeError, subprocess.SubprocessError) as e:
        print_error(f"Install failed: {e}")
        raise typer.Exit(code=1) from None

    print_install_summary(report)

    if dry_run:
        print_info("[dry-run] No changes made.")
        return

    print_success("tmux installation complete.")

    if no_script or not config.write_uninstall_script:
        return

    script_path = get_uninstall_script_path(state.state_path)
    try:
        write_uninstall_script(script_path, state.state_path)
    except OSError as e:
        print_error(f"Could not write uninstall script: {e}")
        raise typer.Exit(code=1) from None
    console.print(f"Created uninstall script: {script_path}")
