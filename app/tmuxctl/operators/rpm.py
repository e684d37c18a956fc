"""RPM-based package operator implementations.

DNF, YUM and Zypper all query the rpm database directly and differ only
in the front-end used for install and remove.
"""

from tmuxctl.models.manager import PackageManagerKind
from tmuxctl.operators.base import PackageOperator


class RpmOperator(PackageOperator):
    """Base operator for package managers backed by the rpm database."""

    def query_command(self, package: str) -> list[str]:
        """Query with rpm -q."""
        return ["rpm", "-q", package]

    def install_commands(self, package: str) -> list[list[str]]:
        """Install with the front-end's install -y."""
        return [["sudo", self.executable, "install", "-y", package]]

    def remove_command(self, package: str) -> list[str]:
        """Remove with the front-end's remove -y."""
        return ["sudo", self.executable, "remove", "-y", package]


class DnfOperator(RpmOperator):
    """Operator for DNF (Fedora, RHEL 8+)."""

    @property
    def kind(self) -> PackageManagerKind:
        """Return DNF as the package manager."""
        return PackageManagerKind.DNF

    @property
    def executable(self) -> str:
        """dnf identifies a DNF system."""
        return "dnf"


class YumOperator(RpmOperator):
    """Operator for YUM (older RHEL/CentOS)."""

    @property
    def kind(self) -> PackageManagerKind:
        """Return YUM as the package manager."""
        return PackageManagerKind.YUM

    @property
    def executable(self) -> str:
        """yum identifies a YUM system."""
        return "yum"


class ZypperOperator(RpmOperator):
    """Operator for Zypper (openSUSE, SLES)."""

    @property
    def kind(self) -> PackageManagerKind:
        """Return ZYPPER as the package manager."""
        return PackageManagerKind.ZYPPER

    @property
    def executable(self) -> str:
        """zypper identifies a Zypper system."""
        return "zypper"
