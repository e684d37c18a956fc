"""Package manager detection.

Probes the host for a known package manager executable in a fixed
priority order.
"""

import logging

from tmuxctl.models.manager import DETECTION_ORDER, PackageManagerKind
from tmuxctl.operators.apt import AptOperator
from tmuxctl.operators.base import PackageOperator
from tmuxctl.operators.pacman import PacmanOperator
from tmuxctl.operators.rpm import DnfOperator, YumOperator, ZypperOperator
from tmuxctl.utils.shell import command_exists

logger = logging.getLogger(__name__)

OPERATORS: dict[PackageManagerKind, type[PackageOperator]] = {
    PackageManagerKind.APT: AptOperator,
    PackageManagerKind.DNF: DnfOperator,
    PackageManagerKind.YUM: YumOperator,
    PackageManagerKind.PACMAN: PacmanOperator,
    PackageManagerKind.ZYPPER: ZypperOperator,
}


def detect_package_manager() -> PackageManagerKind | None:
    """Find the first known package manager on PATH.

    Returns:
        The detected PackageManagerKind, or None if none is present.
    """
    for kind, executable in DETECTION_ORDER:
        if command_exists(executable):
            logger.debug("Detected package manager %s (%s)", kind.value, executable)
            return kind
    logger.debug("No known package manager found")
    return None


def get_operator(kind: PackageManagerKind, dry_run: bool = False) -> PackageOperator:
    """Create the operator for a package manager.

    Args:
        kind: Package manager to drive.
        dry_run: Whether to run in dry-run mode.

    Returns:
        Operator instance for the given kind.
    """
    return OPERATORS[kind](dry_run=dry_run)


def detect_operator(dry_run: bool = False) -> PackageOperator | None:
    """Detect the host package manager and create its operator.

    Args:
        dry_run: Whether to run in dry-run mode.

    Returns:
        Operator for the detected manager, or None if none is present.
    """
    kind = detect_package_manager()
    if kind is None:
        return None
    return get_operator(kind, dry_run=dry_run)
