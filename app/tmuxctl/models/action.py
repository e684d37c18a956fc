"""Action record models for the install state file.

Each mutating step of an install appends one record to the state file.
A record is a single whitespace-free token per line: either the name of a
package installed by tmuxctl, or a ``__``-prefixed sentinel marking a
non-package side effect. The uninstall pass maps each record back to the
step that reverses it.
"""

from dataclasses import dataclass
from enum import Enum


class ActionKind(Enum):
    """Kind of side effect recorded in the state file.

    Attributes:
        PACKAGE_INSTALLED: A package that was absent and got installed.
        CONFIG_WRITTEN: The tmux configuration file was written.
        TERMINFO_CREATED: The terminfo entry was compiled.
        PLUGIN_MANAGER_CLONED: The plugin manager repository was cloned.
        PLUGINS_INSTALLED: The plugin manager's install entry point ran.
    """

    PACKAGE_INSTALLED = "package"
    CONFIG_WRITTEN = "config"
    TERMINFO_CREATED = "terminfo"
    PLUGIN_MANAGER_CLONED = "plugin_manager"
    PLUGINS_INSTALLED = "plugins"


SENTINEL_PREFIX = "__"

SENTINELS: dict[ActionKind, str] = {
    ActionKind.CONFIG_WRITTEN: "__wrote_tmux_conf",
    ActionKind.TERMINFO_CREATED: "__created_terminfo_tmux_256color",
    ActionKind.PLUGIN_MANAGER_CLONED: "__cloned_tpm",
    ActionKind.PLUGINS_INSTALLED: "__installed_plugins",
}

_KIND_BY_SENTINEL: dict[str, ActionKind] = {token: kind for kind, token in SENTINELS.items()}


@dataclass(frozen=True, slots=True)
class ActionRecord:
    """A single entry of the install state file.

    Attributes:
        kind: What kind of side effect was performed.
        package: Package name, set only for PACKAGE_INSTALLED records.
    """

    kind: ActionKind
    package: str | None = None

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if self.kind == ActionKind.PACKAGE_INSTALLED:
            if not self.package:
                msg = "Package name cannot be empty"
                raise ValueError(msg)
            if any(ch.isspace() for ch in self.package):
                msg = f"Package name cannot contain whitespace: {self.package!r}"
                raise ValueError(msg)
            if self.package.startswith(SENTINEL_PREFIX):
                msg = f"Package name cannot start with '{SENTINEL_PREFIX}': {self.package}"
                raise ValueError(msg)
        elif self.package is not None:
            msg = f"{self.kind.value} records do not carry a package name"
            raise ValueError(msg)

    @property
    def label(self) -> str:
        """Human-readable target of the record."""
        if self.package is not None:
            return self.package
        return self.to_line()

    def to_line(self) -> str:
        """Serialize to a state file line (no trailing newline)."""
        if self.package is not None:
            return self.package
        return SENTINELS[self.kind]

    @classmethod
    def from_line(cls, line: str) -> "ActionRecord | None":
        """Parse a state file line.

        Args:
            line: Single line, with or without surrounding whitespace.

        Returns:
            The parsed record, or None for blank lines, unknown sentinels and
            lines holding more than one token.
        """
        token = line.strip()
        if not token or any(ch.isspace() for ch in token):
            return None
        if token.startswith(SENTINEL_PREFIX):
            kind = _KIND_BY_SENTINEL.get(token)
            if kind is None:
                return None
            return cls(kind=kind)
        return cls(kind=ActionKind.PACKAGE_INSTALLED, package=token)


def package_record(name: str) -> ActionRecord:
    """Create a record for a package installed by tmuxctl."""
    return ActionRecord(kind=ActionKind.PACKAGE_INSTALLED, package=name)


@dataclass(frozen=True, slots=True)
class ReversalResult:
    """Result of reversing a single record during uninstall.

    Attributes:
        record: The record that was reversed.
        success: Whether the reversal completed successfully.
        message: Optional success message or additional information.
        error: Optional error message if the reversal failed.
    """

    record: ActionRecord
    success: bool
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the reversal failed."""
        return not self.success
