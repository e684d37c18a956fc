"""terminfo entry management.

Compiles a tmux-256color entry for hosts whose terminfo database lacks
one. Compilation and removal are best-effort: their failures are logged
and otherwise ignored.
"""

import logging
import os
import subprocess
from pathlib import Path
from tempfile import NamedTemporaryFile

from tmuxctl.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


def terminfo_source(name: str) -> str:
    """Build the terminfo source for an entry derived from xterm-256color.

    Args:
        name: Entry name, e.g. "tmux-256color".

    Returns:
        terminfo source text suitable for ``tic``.
    """
    return f"{name}|tmux with 256 colors,\n  use=xterm-256color,\n"


def terminfo_exists(name: str) -> bool:
    """Check whether a terminfo entry is already registered.

    Args:
        name: Entry name.

    Returns:
        True if ``infocmp NAME`` succeeds.
    """
    try:
        return run_command(["infocmp", name]).success
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("infocmp unavailable: %s", e)
        return False


def compile_terminfo(name: str) -> bool:
    """Compile a terminfo entry with ``tic``.

    The source is written to a temporary file which is removed afterwards.
    A failing ``tic`` is logged and ignored.

    Args:
        name: Entry name.

    Returns:
        True if compilation was attempted, False if ``tic`` is not installed.
    """
    if not command_exists("tic"):
        logger.info("tic not found, skipping terminfo %s", name)
        return False

    with NamedTemporaryFile(mode="w", suffix=".terminfo", delete=False, encoding="utf-8") as f:
        f.write(terminfo_source(name))
        source_path = f.name

    try:
        result = run_command(["tic", "-x", source_path])
        if not result.success:
            logger.warning("tic failed for %s: %s", name, result.stderr.strip())
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("tic failed for %s: %s", name, e)
    finally:
        os.unlink(source_path)

    return True


def _system_dirs() -> list[Path]:
    """Terminfo directories ncurses searches, as reported by ``infocmp -D``."""
    try:
        result = run_command(["infocmp", "-D"])
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("infocmp -D unavailable: %s", e)
        return []
    if not result.success:
        return []
    return [Path(line.strip()) for line in result.stdout.splitlines() if line.strip()]


def _database_dirs() -> list[Path]:
    """Directories ``tic`` may have compiled into.

    tic writes to $TERMINFO when set, to ~/.terminfo for normal users and
    to the system database when run as root.
    """
    dirs: list[Path] = []
    env_dir = os.environ.get("TERMINFO")
    if env_dir:
        dirs.append(Path(env_dir))
    dirs.append(Path.home() / ".terminfo")
    if os.geteuid() == 0:
        dirs.extend(_system_dirs())
    return list(dict.fromkeys(dirs))


def _entry_paths(name: str) -> list[Path]:
    """Candidate locations of a compiled entry.

    ncurses files entries under their first letter; some platforms use
    the letter's hex code instead.
    """
    first = name[0]
    return [
        base / sub / name
        for base in _database_dirs()
        for sub in (first, format(ord(first), "x"))
    ]


def remove_terminfo(name: str) -> list[Path]:
    """Remove a compiled terminfo entry from every database tic may have used.

    Errors are logged and ignored.

    Args:
        name: Entry name.

    Returns:
        Paths that were deleted.
    """
    removed: list[Path] = []
    for path in _entry_paths(name):
        try:
            if path.is_file():
                path.unlink()
                removed.append(path)
        except OSError as e:
            logger.warning("Could not remove %s: %s", path, e)
    if removed:
        logger.info("Removed terminfo %s", name)
    return removed
