"""Status command for viewing recorded install actions."""

import json
from typing import Annotated

import typer

from tmuxctl.cli.display import create_state_table, kind_label
from tmuxctl.cli.options import ConfigOption, StateFileOption, resolve
from tmuxctl.core.errors import TmuxctlError
from tmuxctl.models.action import ActionRecord
from tmuxctl.utils.formatting import console, print_error, print_info

app = typer.Typer(
    name="status",
    help="Show what the last install recorded.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def status(
    ctx: typer.Context,
    state_file: StateFileOption = None,
    config_path: ConfigOption = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show the actions recorded in the install state file.

    Examples:
        tmuxctl status           # Table of recorded actions
        tmuxctl status --json    # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        _, state = resolve(config_path, state_file)
    except TmuxctlError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    records = state.read_records()

    if json_output:
        _print_json(records)
        return

    if not records:
        print_info("Nothing recorded. tmuxctl has not installed anything.")
        return

    console.print(create_state_table(records))
    console.print(f"\n[muted]State file: {state.state_path}[/muted]")


def _print_json(records: list[ActionRecord]) -> None:
    """Print records as a JSON array of {action, target} objects."""
    data = [{"action": kind_label(r.kind), "target": r.label} for r in records]
    typer.echo(json.dumps(data, indent=2))
