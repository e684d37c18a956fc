"""Package operators for querying, installing and removing packages.

This module provides abstract and concrete implementations of package
operators for the supported package managers, plus host detection.
"""

from tmuxctl.operators.apt import AptOperator
from tmuxctl.operators.base import PackageOperator
from tmuxctl.operators.detect import detect_operator, detect_package_manager, get_operator
from tmuxctl.operators.pacman import PacmanOperator
from tmuxctl.operators.rpm import DnfOperator, RpmOperator, YumOperator, ZypperOperator

__all__ = [
    "AptOperator",
    "DnfOperator",
    "PackageOperator",
    "PacmanOperator",
    "RpmOperator",
    "YumOperator",
    "ZypperOperator",
    "detect_operator",
    "detect_package_manager",
    "get_operator",
]
