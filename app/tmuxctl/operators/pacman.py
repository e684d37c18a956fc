"""Pacman package operator implementation."""

from tmuxctl.models.manager import PackageManagerKind
from tmuxctl.operators.base import PackageOperator


class PacmanOperator(PackageOperator):
    """Operator for pacman (Arch Linux and derivatives).

    Installs run a full system upgrade alongside, since partial upgrades
    are unsupported on Arch.
    """

    @property
    def kind(self) -> PackageManagerKind:
        """Return PACMAN as the package manager."""
        return PackageManagerKind.PACMAN

    @property
    def executable(self) -> str:
        """pacman identifies an Arch system."""
        return "pacman"

    def query_command(self, package: str) -> list[str]:
        """Query with pacman -Qi."""
        return ["pacman", "-Qi", package]

    def install_commands(self, package: str) -> list[list[str]]:
        """Sync, upgrade and install in one transaction."""
        return [["sudo", "pacman", "-Syu", "--noconfirm", package]]

    def remove_command(self, package: str) -> list[str]:
        """Remove the package and its unneeded dependencies."""
        return ["sudo", "pacman", "-Rs", "--noconfirm", package]
