"""State management for install tracking.

This module provides the StateManager class for persisting the actions
performed by an install, so that uninstall can reverse exactly those.
"""

import logging
from pathlib import Path

from tmuxctl.core.paths import ensure_dir, get_state_path
from tmuxctl.models.action import ActionRecord

logger = logging.getLogger(__name__)

_REPLACEMENT_CHAR = "\ufffd"


class StateManager:
    """Manages the install state file.

    Default location: ~/.local/state/tmuxctl/install-state

    The state file holds one record per line in the order the actions were
    performed. It is created by the first mutating action and deleted after
    a fully successful uninstall; its absence means there is nothing to undo.

    Attributes:
        state_path: Path to the state file.
    """

    def __init__(self, state_file: Path | None = None) -> None:
        """Initialize StateManager.

        Args:
            state_file: Optional override for the state file location.
                        Default: ~/.local/state/tmuxctl/install-state
        """
        self._state_file = state_file if state_file is not None else get_state_path()

    @property
    def state_path(self) -> Path:
        """Path to the state file."""
        return self._state_file

    def exists(self) -> bool:
        """Check if any install state has been recorded."""
        return self._state_file.is_file()

    def record(self, record: ActionRecord) -> None:
        """Append a record to the state file.

        Creates the file and parent directories if they don't exist.

        Args:
            record: The action record to append.

        Raises:
            RuntimeError: If the state directory cannot be created.
            OSError: If the file cannot be written.
        """
        ensure_dir(self._state_file.parent, "state")

        with self._state_file.open(mode="a", encoding="utf-8") as f:
            f.write(record.to_line() + "\n")
            f.flush()

        logger.debug("Recorded %s in %s", record.to_line(), self._state_file)

    def read_records(self) -> list[ActionRecord]:
        """Read all records in file order.

        Blank lines are skipped silently. Unrecognized lines, including
        ones that are not valid UTF-8, are skipped with a warning.

        Returns:
            List of ActionRecord, oldest first.
            Returns empty list if file doesn't exist.
        """
        if not self.exists():
            return []

        records: list[ActionRecord] = []

        with self._state_file.open(encoding="utf-8", errors="replace") as f:
            for line_num, line in enumerate(f, start=1):
                if not line.strip():
                    continue

                # Undecodable bytes come through as U+FFFD
                record = None if _REPLACEMENT_CHAR in line else ActionRecord.from_line(line)
                if record is None:
                    logger.warning(
                        "Ignoring unrecognized state line %d: %s",
                        line_num,
                        line.strip(),
                    )
                    continue
                records.append(record)

        return records

    def rewrite(self, records: list[ActionRecord]) -> None:
        """Replace the state file contents with the given records.

        Args:
            records: Records to keep. An empty list deletes the file.

        Raises:
            OSError: If the file cannot be written.
        """
        if not records:
            self.clear()
            return

        ensure_dir(self._state_file.parent, "state")
        content = "".join(r.to_line() + "\n" for r in records)
        self._state_file.write_text(content, encoding="utf-8")

    def clear(self) -> bool:
        """Delete the state file.

        Returns:
            True if a file was deleted, False if none existed.
        """
        if not self._state_file.exists():
            return False
        self._state_file.unlink()
        logger.debug("Deleted state file %s", self._state_file)
        return True
