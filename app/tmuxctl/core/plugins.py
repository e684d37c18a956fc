"""Plugin manager bootstrapping.

Clones TPM (the tmux plugin manager) and runs its non-interactive
install-all-plugins entry point.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path

from tmuxctl.core.errors import GitNotFoundError, PluginBootstrapError
from tmuxctl.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

# Cloning and plugin installs go over the network
_NETWORK_TIMEOUT: float = 300.0

INSTALL_ENTRY_POINT = Path("bin") / "install_plugins"


def require_git() -> None:
    """Ensure git is installed.

    Raises:
        GitNotFoundError: If git is not on PATH.
    """
    if not command_exists("git"):
        raise GitNotFoundError("git is required but not installed.")


def clone_plugin_manager(repo_url: str, target: Path) -> bool:
    """Clone the plugin manager unless it is already present.

    Args:
        repo_url: Git URL of the plugin manager.
        target: Checkout directory.

    Returns:
        True if a clone was made, False if the directory already existed.

    Raises:
        PluginBootstrapError: If git clone fails.
    """
    if target.is_dir():
        logger.info("Plugin manager already present at %s", target)
        return False

    target.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Cloning %s into %s", repo_url, target)

    try:
        result = run_command(["git", "clone", repo_url, str(target)], timeout=_NETWORK_TIMEOUT)
    except (OSError, subprocess.SubprocessError) as e:
        raise PluginBootstrapError(f"git clone {repo_url} failed: {e}") from e

    if not result.success:
        msg = f"git clone {repo_url} failed: {result.stderr.strip() or 'unknown error'}"
        raise PluginBootstrapError(msg)

    return True


def has_install_entry_point(plugin_manager_dir: Path) -> bool:
    """Check whether the plugin manager exposes an executable install script."""
    entry = plugin_manager_dir / INSTALL_ENTRY_POINT
    return entry.is_file() and os.access(entry, os.X_OK)


def install_plugins(plugin_manager_dir: Path) -> bool:
    """Run the plugin manager's install-all-plugins entry point.

    Failures of the entry point are logged and ignored.

    Args:
        plugin_manager_dir: Plugin manager checkout.

    Returns:
        True if the entry point was invoked, False if it does not exist.
    """
    if not has_install_entry_point(plugin_manager_dir):
        logger.info("No plugin install entry point in %s", plugin_manager_dir)
        return False

    entry = plugin_manager_dir / INSTALL_ENTRY_POINT
    try:
        result = run_command([str(entry)], timeout=_NETWORK_TIMEOUT)
        if result.success:
            logger.info("Plugins installed")
        else:
            logger.warning(
                "Plugin install exited with %d: %s", result.returncode, result.stderr.strip()
            )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Plugin install failed: %s", e)

    return True


def remove_plugin_manager(target: Path) -> bool:
    """Recursively delete the plugin manager checkout.

    Args:
        target: Checkout directory.

    Returns:
        True if the directory was deleted, False if it did not exist.

    Raises:
        OSError: If the directory cannot be deleted.
    """
    if not target.exists():
        return False
    shutil.rmtree(target)
    logger.info("Removed %s", target)
    return True
