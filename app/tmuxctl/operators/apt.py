"""APT package operator implementation.

Queries packages with dpkg and installs/removes them using apt-get.
"""

from tmuxctl.models.manager import PackageManagerKind
from tmuxctl.operators.base import PackageOperator


class AptOperator(PackageOperator):
    """Operator for APT/dpkg packages.

    The package index is refreshed before every install.
    """

    @property
    def kind(self) -> PackageManagerKind:
        """Return APT as the package manager."""
        return PackageManagerKind.APT

    @property
    def executable(self) -> str:
        """apt-get identifies an APT system."""
        return "apt-get"

    def query_command(self, package: str) -> list[str]:
        """Query with dpkg -s."""
        return ["dpkg", "-s", package]

    def install_commands(self, package: str) -> list[list[str]]:
        """Refresh the index, then install."""
        return [
            ["sudo", "apt-get", "update", "-y"],
            ["sudo", "apt-get", "install", "-y", package],
        ]

    def remove_command(self, package: str) -> list[str]:
        """Remove with apt-get remove."""
        return ["sudo", "apt-get", "remove", "-y", package]
