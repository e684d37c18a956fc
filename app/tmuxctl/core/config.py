"""Installer configuration and settings.

This module provides the configuration model and I/O functions for the
installer: which packages to install, where the tmux configuration and
plugin manager live, and where the install state is recorded.

Configuration is stored in ~/.config/tmuxctl/config.toml. Every key is
optional; a missing file yields the defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tmuxctl.core.errors import ConfigError, ConfigParseError
from tmuxctl.core.paths import get_config_path, get_state_path

logger = logging.getLogger(__name__)

DEFAULT_PACKAGES: tuple[str, ...] = ("tmux", "git", "xclip")
DEFAULT_PLUGIN_REPO = "https://github.com/tmux-plugins/tpm"
DEFAULT_TERMINFO_NAME = "tmux-256color"


class InstallerConfig(BaseModel):
    """Configuration for the tmux installer.

    Attributes:
        packages: Packages that must be present, installed in order.
        tmux_conf: Path of the tmux configuration file to write.
        plugin_dir: Directory the plugin manager is cloned into.
        plugin_repo: Git URL of the plugin manager.
        terminfo_name: Terminal capability entry to ensure.
        state_file: Install state file. None uses the XDG state directory.
        write_uninstall_script: Write uninstall_tmux.sh after installing.
    """

    model_config = ConfigDict(extra="forbid", validate_default=True)

    packages: Annotated[
        list[str],
        Field(min_length=1, description="Packages to install if missing"),
    ] = list(DEFAULT_PACKAGES)
    tmux_conf: Annotated[
        Path,
        Field(description="tmux configuration file"),
    ] = Path("~/.tmux.conf")
    plugin_dir: Annotated[
        Path,
        Field(description="Plugin manager checkout"),
    ] = Path("~/.tmux/plugins/tpm")
    plugin_repo: Annotated[
        str,
        Field(min_length=1, description="Plugin manager git URL"),
    ] = DEFAULT_PLUGIN_REPO
    terminfo_name: Annotated[
        str,
        Field(min_length=1, description="terminfo entry to ensure"),
    ] = DEFAULT_TERMINFO_NAME
    state_file: Annotated[
        Path | None,
        Field(description="Install state file (None = XDG state dir)"),
    ] = None
    write_uninstall_script: bool = True

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, value: list[str]) -> list[str]:
        """Reject package names that cannot be stored as state records."""
        for name in value:
            if not name or any(ch.isspace() for ch in name):
                msg = f"invalid package name {name!r}"
                raise ValueError(msg)
            if name.startswith("__"):
                msg = f"package name cannot start with '__': {name}"
                raise ValueError(msg)
        return value

    @field_validator("tmux_conf", "plugin_dir", "state_file")
    @classmethod
    def expand_user(cls, value: Path | None) -> Path | None:
        """Expand ``~`` in configured paths."""
        if value is None:
            return None
        return value.expanduser()

    @property
    def effective_state_file(self) -> Path:
        """Get the state file path, falling back to the XDG default."""
        if self.state_file is not None:
            return self.state_file
        return get_state_path()


def load_config(path: Path | None = None) -> InstallerConfig:
    """Load installer configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated InstallerConfig. Defaults if the file doesn't exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return InstallerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return InstallerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: InstallerConfig, path: Path | None = None) -> Path:
    """Save installer configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The InstallerConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: InstallerConfig) -> dict[str, object]:
    """Convert InstallerConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset state_file is omitted.

    Args:
        config: The InstallerConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {
        "packages": list(config.packages),
        "tmux_conf": str(config.tmux_conf),
        "plugin_dir": str(config.plugin_dir),
        "plugin_repo": config.plugin_repo,
        "terminfo_name": config.terminfo_name,
        "write_uninstall_script": config.write_uninstall_script,
    }
    if config.state_file is not None:
        result["state_file"] = str(config.state_file)
    return result
