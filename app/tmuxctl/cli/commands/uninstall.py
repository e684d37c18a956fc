"""Uninstall command for reversing an install.

This module provides the `tmuxctl uninstall` command which reads the
install state file and reverses every recorded action.
"""

from typing import Annotated

import typer

from tmuxctl.cli.display import create_reversal_table, create_state_table
from tmuxctl.cli.options import ConfigOption, DryRunOption, StateFileOption, resolve
from tmuxctl.core.errors import TmuxctlError
from tmuxctl.core.paths import get_uninstall_script_path
from tmuxctl.core.uninstaller import Uninstaller
from tmuxctl.operators.detect import detect_operator
from tmuxctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    name="uninstall",
    help="Reverse everything tmuxctl installed.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def uninstall(
    ctx: typer.Context,
    dry_run: DryRunOption = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt.",
        ),
    ] = False,
    state_file: StateFileOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Reverse everything tmuxctl installed.

    Removes the packages tmuxctl installed (never ones that were already
    present), the tmux configuration, the plugin manager and the compiled
    terminfo entry, then deletes the state file.

    Examples:
        tmuxctl uninstall              # Uninstall with confirmation
        tmuxctl uninstall --dry-run    # Preview only
        tmuxctl uninstall -y           # Skip confirmation
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config, state = resolve(config_path, state_file)
    except TmuxctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not state.exists():
        print_info("No install state found. Nothing to uninstall.")
        return

    uninstaller = Uninstaller(
        config,
        state,
        detect_operator(dry_run=dry_run),
        dry_run=dry_run,
        script_path=get_uninstall_script_path(state.state_path),
    )

    records = uninstaller.plan()
    console.print(create_state_table(records, title="Actions to Reverse"))

    if not dry_run and not yes:
        confirm = typer.confirm("Do you want to reverse these actions?")
        if not confirm:
            print_info("Cancelled.")
            return

    print_info("Starting tmux uninstall...")
    report = uninstaller.run()

    if report.results:
        console.print(create_reversal_table(report.results))

    if dry_run:
        print_info("[dry-run] No changes made.")
        return

    if not report.success:
        print_error(
            f"{len(report.failed)} action(s) could not be reversed. "
            f"They remain in {state.state_path}; rerun uninstall to retry."
        )
        raise typer.Exit(code=1)

    print_success("tmux uninstall complete.")
