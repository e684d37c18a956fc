"""Data models for tmuxctl.

This module exports the core data structures used throughout the application.
"""

from tmuxctl.models.action import (
    SENTINELS,
    ActionKind,
    ActionRecord,
    ReversalResult,
    package_record,
)
from tmuxctl.models.manager import DETECTION_ORDER, PackageManagerKind

__all__ = [
    "DETECTION_ORDER",
    "SENTINELS",
    "ActionKind",
    "ActionRecord",
    "PackageManagerKind",
    "ReversalResult",
    "package_record",
]
