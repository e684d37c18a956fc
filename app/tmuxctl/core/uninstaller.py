"""Reversal engine.

Reads the install state file and undoes each recorded action. Every
record is attempted even if an earlier one fails; records whose reversal
failed are kept in the state file so a later run can retry them.
"""

import logging
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from tmuxctl.core import plugins, terminfo, tmux_conf
from tmuxctl.core.config import InstallerConfig
from tmuxctl.core.state import StateManager
from tmuxctl.core.uninstall_script import remove_uninstall_script
from tmuxctl.models.action import ActionKind, ActionRecord, ReversalResult
from tmuxctl.operators.base import PackageOperator

logger = logging.getLogger(__name__)


@dataclass
class UninstallReport:
    """Outcome of an uninstall run.

    Attributes:
        results: One result per distinct record, in file order.
        nothing_to_do: True if there was no state file.
        state_cleared: True if the state file was deleted.
        dry_run: Whether nothing was actually changed.
    """

    results: list[ReversalResult] = field(default_factory=list)
    nothing_to_do: bool = False
    state_cleared: bool = False
    dry_run: bool = False

    @property
    def failed(self) -> list[ReversalResult]:
        """Results whose reversal failed."""
        return [r for r in self.results if r.failed]

    @property
    def success(self) -> bool:
        """Check if every reversal succeeded."""
        return not self.failed


class Uninstaller:
    """Reverses the actions recorded by an install.

    Attributes:
        operator: Package operator for removing packages, or None if the
            host has no supported package manager.
    """

    def __init__(
        self,
        config: InstallerConfig,
        state: StateManager,
        operator: PackageOperator | None,
        dry_run: bool = False,
        script_path: Path | None = None,
    ) -> None:
        self._config = config
        self._state = state
        self._operator = operator
        self._dry_run = dry_run
        self._script_path = script_path
        self._handlers: dict[ActionKind, Callable[[ActionRecord], ReversalResult]] = {
            ActionKind.CONFIG_WRITTEN: self._remove_config,
            ActionKind.PLUGIN_MANAGER_CLONED: self._remove_plugin_manager,
            ActionKind.TERMINFO_CREATED: self._remove_terminfo,
            ActionKind.PLUGINS_INSTALLED: self._skip_plugins,
            ActionKind.PACKAGE_INSTALLED: self._remove_package,
        }

    def plan(self) -> list[ActionRecord]:
        """Get the records to reverse.

        Repeated records (the config sentinel is appended on every install)
        are reversed once.

        Returns:
            Distinct records in file order.
        """
        return list(dict.fromkeys(self._state.read_records()))

    def run(self) -> UninstallReport:
        """Reverse every recorded action.

        If all reversals succeed the state file (and the generated
        uninstall script) are deleted. Otherwise the state file is rewritten
        to hold only the records that failed.

        Returns:
            UninstallReport with one result per record.
        """
        if not self._state.exists():
            return UninstallReport(nothing_to_do=True, dry_run=self._dry_run)

        report = UninstallReport(dry_run=self._dry_run)
        for record in self.plan():
            report.results.append(self.reverse(record))

        if self._dry_run:
            return report

        failed_records = [r.record for r in report.failed]
        self._state.rewrite(failed_records)

        if failed_records:
            logger.warning(
                "%d record(s) could not be reversed and were kept in %s",
                len(failed_records),
                self._state.state_path,
            )
        else:
            report.state_cleared = True
            if self._script_path is not None:
                remove_uninstall_script(self._script_path)

        return report

    def reverse(self, record: ActionRecord) -> ReversalResult:
        """Reverse a single record.

        Args:
            record: The record to reverse.

        Returns:
            ReversalResult describing the outcome.
        """
        handler = self._handlers[record.kind]
        try:
            return handler(record)
        except OSError as e:
            logger.warning("Failed to reverse %s: %s", record.label, e)
            return ReversalResult(record=record, success=False, error=str(e))

    def _remove_config(self, record: ActionRecord) -> ReversalResult:
        path = self._config.tmux_conf
        if self._dry_run:
            return ReversalResult(record=record, success=True, message=f"Would remove {path}")
        if tmux_conf.remove_tmux_conf(path):
            return ReversalResult(record=record, success=True, message=f"Removed {path}")
        return ReversalResult(record=record, success=True, message=f"{path} already absent")

    def _remove_plugin_manager(self, record: ActionRecord) -> ReversalResult:
        path = self._config.plugin_dir
        if self._dry_run:
            return ReversalResult(record=record, success=True, message=f"Would remove {path}")
        if plugins.remove_plugin_manager(path):
            return ReversalResult(record=record, success=True, message=f"Removed {path}")
        return ReversalResult(record=record, success=True, message=f"{path} already absent")

    def _remove_terminfo(self, record: ActionRecord) -> ReversalResult:
        name = self._config.terminfo_name
        if self._dry_run:
            return ReversalResult(record=record, success=True, message=f"Would remove {name}")
        terminfo.remove_terminfo(name)
        return ReversalResult(record=record, success=True, message=f"Removed {name} terminfo")

    def _skip_plugins(self, record: ActionRecord) -> ReversalResult:
        return ReversalResult(
            record=record,
            success=True,
            message="Plugins live in the plugin directory",
        )

    def _remove_package(self, record: ActionRecord) -> ReversalResult:
        package = record.package or ""
        if self._operator is None:
            return ReversalResult(
                record=record,
                success=False,
                error="No supported package manager found",
            )

        try:
            result = self._operator.remove(package)
        except (RuntimeError, subprocess.SubprocessError) as e:
            return ReversalResult(record=record, success=False, error=str(e))

        if not result.success:
            error = result.stderr.strip() or f"exit code {result.returncode}"
            logger.warning("Failed to remove %s: %s", package, error)
            return ReversalResult(record=record, success=False, error=error)

        verb = "Would remove" if self._dry_run else "Removed"
        return ReversalResult(record=record, success=True, message=f"{verb} package {package}")
