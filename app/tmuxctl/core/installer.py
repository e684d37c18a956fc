"""Install orchestration.

Runs the install steps in order and records each side effect in the
state file as soon as it has happened, so that a failure part way
through still leaves an accurate record of what to undo.
"""

import logging
from dataclasses import dataclass, field

from tmuxctl.core import plugins, terminfo, tmux_conf
from tmuxctl.core.config import InstallerConfig
from tmuxctl.core.errors import GitNotFoundError, PackageInstallError
from tmuxctl.core.state import StateManager
from tmuxctl.models.action import ActionKind, ActionRecord, package_record
from tmuxctl.operators.base import PackageOperator
from tmuxctl.utils.shell import command_exists

logger = logging.getLogger(__name__)


@dataclass
class InstallReport:
    """Summary of what an install run did (or would do, in dry-run).

    Attributes:
        installed: Packages installed by this run.
        already_present: Packages that were installed beforehand.
        terminfo_created: Whether the terminfo entry was compiled.
        config_written: Whether the tmux configuration was written.
        plugin_manager_cloned: Whether the plugin manager was cloned.
        plugins_installed: Whether the plugin install entry point ran.
        dry_run: Whether nothing was actually changed.
    """

    installed: list[str] = field(default_factory=list)
    already_present: list[str] = field(default_factory=list)
    terminfo_created: bool = False
    config_written: bool = False
    plugin_manager_cloned: bool = False
    plugins_installed: bool = False
    dry_run: bool = False


class Installer:
    """Idempotent tmux installer.

    Packages that are already installed are left alone and never recorded,
    so uninstall only removes what this tool added.

    Example:
        >>> installer = Installer(load_config(), StateManager(), AptOperator())
        >>> report = installer.run()
    """

    def __init__(
        self,
        config: InstallerConfig,
        state: StateManager,
        operator: PackageOperator,
        dry_run: bool = False,
    ) -> None:
        self._config = config
        self._state = state
        self._operator = operator
        self._dry_run = dry_run

    def run(self) -> InstallReport:
        """Run all install steps.

        Returns:
            InstallReport describing the changes.

        Raises:
            PackageInstallError: If a package fails to install.
            GitNotFoundError: If git is missing when the plugins are set up.
            PluginBootstrapError: If the plugin manager cannot be cloned.
            OSError: If the configuration or state file cannot be written.
        """
        report = InstallReport(dry_run=self._dry_run)
        self.install_packages(report)
        self.ensure_terminfo(report)
        self.write_config(report)
        self.bootstrap_plugins(report)
        return report

    def install_packages(self, report: InstallReport) -> None:
        """Install every configured package that is missing."""
        for package in self._config.packages:
            if self._operator.is_installed(package):
                logger.info("%s already installed", package)
                report.already_present.append(package)
                continue

            result = self._operator.install(package)
            if not result.success:
                detail = result.stderr.strip() or f"exit code {result.returncode}"
                msg = f"Failed to install {package} with {self._operator.kind.value}: {detail}"
                raise PackageInstallError(msg)

            self._record(package_record(package))
            report.installed.append(package)

    def ensure_terminfo(self, report: InstallReport) -> None:
        """Compile the terminfo entry if the host lacks it."""
        name = self._config.terminfo_name
        if terminfo.terminfo_exists(name):
            logger.info("terminfo %s already present", name)
            return

        if self._dry_run:
            report.terminfo_created = command_exists("tic")
        else:
            report.terminfo_created = terminfo.compile_terminfo(name)

        if report.terminfo_created:
            self._record(ActionRecord(kind=ActionKind.TERMINFO_CREATED))

    def write_config(self, report: InstallReport) -> None:
        """Write the tmux configuration. Runs on every install."""
        if not self._dry_run:
            tmux_conf.write_tmux_conf(self._config.tmux_conf, self._config.plugin_dir)
        report.config_written = True
        self._record(ActionRecord(kind=ActionKind.CONFIG_WRITTEN))

    def bootstrap_plugins(self, report: InstallReport) -> None:
        """Clone the plugin manager and install its plugins."""
        target = self._config.plugin_dir

        try:
            plugins.require_git()
        except GitNotFoundError:
            # In dry-run git may be one of the packages not yet installed.
            if not (self._dry_run and "git" in report.installed):
                raise

        if self._dry_run:
            report.plugin_manager_cloned = not target.is_dir()
            report.plugins_installed = plugins.has_install_entry_point(target)
            return

        if plugins.clone_plugin_manager(self._config.plugin_repo, target):
            report.plugin_manager_cloned = True
            self._record(ActionRecord(kind=ActionKind.PLUGIN_MANAGER_CLONED))

        if plugins.install_plugins(target):
            report.plugins_installed = True
            self._record(ActionRecord(kind=ActionKind.PLUGINS_INSTALLED))

    def _record(self, record: ActionRecord) -> None:
        if self._dry_run:
            logger.debug("Dry-run: would record %s", record.to_line())
            return
        self._state.record(record)
