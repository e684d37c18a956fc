"""Abstract base class for package operators.

This module defines the PackageOperator interface that all package
manager operators must implement.
"""

import logging
from abc import ABC, abstractmethod

from tmuxctl.models.manager import PackageManagerKind
from tmuxctl.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


class PackageOperator(ABC):
    """Abstract base class for all package operators.

    Operators query, install and remove single packages with one specific
    package manager. Install and remove run with sudo.

    Attributes:
        dry_run: If True, only log the commands without executing them.

    Example:
        >>> operator = AptOperator()
        >>> if operator.is_available() and not operator.is_installed("tmux"):
        ...     result = operator.install("tmux")
        ...     print(result.success)
    """

    # Timeout for install/remove operations (5 minutes)
    _PACKAGE_TIMEOUT: float = 300.0

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only log actions without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    @property
    @abstractmethod
    def kind(self) -> PackageManagerKind:
        """Return the package manager this operator drives."""

    @property
    @abstractmethod
    def executable(self) -> str:
        """Return the executable whose presence identifies the manager."""

    @abstractmethod
    def query_command(self, package: str) -> list[str]:
        """Build the command that exits 0 when the package is installed."""

    @abstractmethod
    def install_commands(self, package: str) -> list[list[str]]:
        """Build the commands that install the package, run in order."""

    @abstractmethod
    def remove_command(self, package: str) -> list[str]:
        """Build the command that removes the package."""

    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""
        return command_exists(self.executable)

    def is_installed(self, package: str) -> bool:
        """Check whether a package is currently installed.

        Args:
            package: Package name to query.

        Returns:
            True if the query command succeeds, False otherwise
            (including when the query tool itself is missing).
        """
        try:
            result = run_command(self.query_command(package))
        except FileNotFoundError:
            logger.debug("Query tool for %s not found", self.kind.value)
            return False
        return result.success

    def install(self, package: str) -> CommandResult:
        """Install a package.

        Args:
            package: Package name to install.

        Returns:
            CommandResult of the last command run, or of the first one
            that failed.

        Raises:
            RuntimeError: If the package manager is not available.
        """
        self._require_available()
        logger.info("Installing %s with %s (dry_run=%s)", package, self.kind.value, self.dry_run)

        result = CommandResult(stdout="", stderr="", returncode=0)
        for args in self.install_commands(package):
            result = self._run(args)
            if not result.success:
                break
        return result

    def remove(self, package: str) -> CommandResult:
        """Remove a package.

        Args:
            package: Package name to remove.

        Returns:
            CommandResult of the removal command.

        Raises:
            RuntimeError: If the package manager is not available.
        """
        self._require_available()
        logger.info("Removing %s with %s (dry_run=%s)", package, self.kind.value, self.dry_run)
        return self._run(self.remove_command(package))

    def _require_available(self) -> None:
        if not self.is_available():
            msg = f"{self.kind.value.upper()} package manager is not available on this system"
            raise RuntimeError(msg)

    def _run(self, args: list[str]) -> CommandResult:
        if self.dry_run:
            logger.info("Dry-run: would run %s", " ".join(args))
            return CommandResult(stdout="", stderr="", returncode=0)
        return run_command(args, timeout=self._PACKAGE_TIMEOUT)
