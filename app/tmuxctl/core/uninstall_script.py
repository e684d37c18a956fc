"""Generated uninstall script.

After an install, a small shell script is written beside the state file
so the setup can be reversed without remembering the CLI invocation.
"""

import logging
import shlex
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def render_uninstall_script(state_file: Path, python: str | None = None) -> str:
    """Render the uninstall script text.

    Args:
        state_file: State file the script reverses.
        python: Interpreter to run tmuxctl with. Defaults to the current one.

    Returns:
        Script text.
    """
    interpreter = shlex.quote(python or sys.executable)
    state = shlex.quote(str(state_file))
    return (
        "#!/usr/bin/env bash\n"
        "set -euo pipefail\n"
        "\n"
        f'exec {interpreter} -m tmuxctl uninstall --yes --state-file {state} "$@"\n'
    )


def write_uninstall_script(path: Path, state_file: Path) -> Path:
    """Write the executable uninstall script.

    Args:
        path: Script destination.
        state_file: State file the script reverses.

    Returns:
        The path written.

    Raises:
        OSError: If the script cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_uninstall_script(state_file), encoding="utf-8")
    path.chmod(0o755)
    logger.info("Created uninstall script %s", path)
    return path


def remove_uninstall_script(path: Path) -> bool:
    """Delete the uninstall script if present."""
    if not path.is_file():
        return False
    path.unlink()
    return True
