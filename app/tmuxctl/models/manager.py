"""Package manager models.

This module defines the package managers tmuxctl knows how to drive and
the order in which they are probed on the host.
"""

from enum import Enum


class PackageManagerKind(Enum):
    """Enumeration of supported package managers."""

    APT = "apt"
    DNF = "dnf"
    YUM = "yum"
    PACMAN = "pacman"
    ZYPPER = "zypper"


# Probe order: first executable found on PATH wins.
DETECTION_ORDER: tuple[tuple[PackageManagerKind, str], ...] = (
    (PackageManagerKind.APT, "apt-get"),
    (PackageManagerKind.DNF, "dnf"),
    (PackageManagerKind.YUM, "yum"),
    (PackageManagerKind.PACMAN, "pacman"),
    (PackageManagerKind.ZYPPER, "zypper"),
)
