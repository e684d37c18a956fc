"""XDG-compliant path management for tmuxctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage.

XDG defaults:
- Config: ~/.config/tmuxctl/
- State: ~/.local/state/tmuxctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "tmuxctl"

STATE_FILENAME = "install-state"
UNINSTALL_SCRIPT_FILENAME = "uninstall_tmux.sh"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/tmuxctl/ (or XDG_CONFIG_HOME/tmuxctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    The state directory holds the install state file and the generated
    uninstall script.

    Returns:
        Path to ~/.local/state/tmuxctl/ (or XDG_STATE_HOME/tmuxctl/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the default config file path.

    Returns:
        Path to ~/.config/tmuxctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_state_path() -> Path:
    """Get the default install state file path.

    Returns:
        Path to ~/.local/state/tmuxctl/install-state.
    """
    return get_state_dir() / STATE_FILENAME


def get_uninstall_script_path(state_file: Path) -> Path:
    """Get the uninstall script path for a state file.

    The script always lives beside the state file it reverses.

    Args:
        state_file: Path to the install state file.

    Returns:
        Path to uninstall_tmux.sh in the state file's directory.
    """
    return state_file.parent / UNINSTALL_SCRIPT_FILENAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
