"""Shared Rich display functions for install and uninstall output."""

from rich.table import Table

from tmuxctl.core.installer import InstallReport
from tmuxctl.models.action import ActionKind, ActionRecord, ReversalResult
from tmuxctl.utils.formatting import console, create_records_table

_KIND_LABELS: dict[ActionKind, str] = {
    ActionKind.PACKAGE_INSTALLED: "package",
    ActionKind.CONFIG_WRITTEN: "config",
    ActionKind.TERMINFO_CREATED: "terminfo",
    ActionKind.PLUGIN_MANAGER_CLONED: "plugin manager",
    ActionKind.PLUGINS_INSTALLED: "plugins",
}


def kind_label(kind: ActionKind) -> str:
    """Short display name for a record kind."""
    return _KIND_LABELS[kind]


def create_state_table(records: list[ActionRecord], title: str = "Recorded Actions") -> Table:
    """Create a Rich table listing state records in file order.

    Args:
        records: Records to display.
        title: Table title.

    Returns:
        Rich Table with one row per record.
    """
    table = create_records_table(title)
    for index, record in enumerate(records, start=1):
        table.add_row(str(index), kind_label(record.kind), record.label)
    return table


def create_reversal_table(results: list[ReversalResult]) -> Table:
    """Create a Rich table displaying reversal results.

    Args:
        results: Results to display.

    Returns:
        Rich Table with Status, Action, Target and Message columns.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=6, justify="center")
    table.add_column("Action", no_wrap=True)
    table.add_column("Target", no_wrap=True)
    table.add_column("Message")

    for result in results:
        if result.success:
            status = "[success]OK[/success]"
            message = f"[muted]{result.message or ''}[/muted]"
        else:
            status = "[error]FAIL[/error]"
            message = f"[error]{result.error or 'Unknown error'}[/error]"
        table.add_row(status, kind_label(result.record.kind), result.record.label, message)

    return table


def print_install_summary(report: InstallReport) -> None:
    """Print what an install run changed.

    Args:
        report: The install report.
    """
    prefix = "would " if report.dry_run else ""

    if report.installed:
        verb = "install" if report.dry_run else "installed"
        console.print(f"  [added]+[/added] {prefix}{verb} packages: {', '.join(report.installed)}")
    if report.already_present:
        console.print(f"  [muted]= already installed: {', '.join(report.already_present)}[/muted]")
    if report.terminfo_created:
        console.print(f"  [added]+[/added] {prefix}compile terminfo entry")
    if report.config_written:
        console.print(f"  [added]+[/added] {prefix}write tmux configuration")
    if report.plugin_manager_cloned:
        console.print(f"  [added]+[/added] {prefix}clone plugin manager")
    if report.plugins_installed:
        console.print(f"  [added]+[/added] {prefix}install plugins")
