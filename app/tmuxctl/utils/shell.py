"""Subprocess helpers for driving package managers and tmux tooling."""

import shutil
import subprocess
from dataclasses import dataclass

# Queries (dpkg -s, infocmp, ...) should answer quickly
DEFAULT_TIMEOUT: float = 60.0


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of an external command.

    Attributes:
        stdout: Standard output, decoded as text.
        stderr: Standard error, decoded as text.
        returncode: Exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the command exited with status 0."""
        return self.returncode == 0


def run_command(args: list[str], *, timeout: float = DEFAULT_TIMEOUT) -> CommandResult:
    """Run an external command and capture its output.

    A non-zero exit is reported through the result, not raised.

    Args:
        args: Executable followed by its arguments.
        timeout: Seconds to wait before giving up.

    Returns:
        CommandResult for the finished process.

    Raises:
        FileNotFoundError: If the executable does not exist.
        subprocess.TimeoutExpired: If the command runs past the timeout.
    """
    completed = subprocess.run(args, capture_output=True, text=True, timeout=timeout)
    return CommandResult(
        stdout=completed.stdout,
        stderr=completed.stderr,
        returncode=completed.returncode,
    )


def command_exists(name: str) -> bool:
    """Check whether an executable is on PATH."""
    return shutil.which(name) is not None
