"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from tmuxctl.core.config import InstallerConfig
from tmuxctl.core.state import StateManager
from tmuxctl.models.manager import PackageManagerKind
from tmuxctl.operators.base import PackageOperator
from tmuxctl.utils.shell import CommandResult


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """A fake home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def config(tmp_path: Path, home: Path) -> InstallerConfig:
    """Installer config pointing every path into tmp_path."""
    return InstallerConfig(
        tmux_conf=home / ".tmux.conf",
        plugin_dir=home / ".tmux" / "plugins" / "tpm",
        state_file=tmp_path / "state" / "install-state",
    )


@pytest.fixture
def state(config: InstallerConfig) -> StateManager:
    """StateManager writing to the config's state file."""
    return StateManager(state_file=config.effective_state_file)


@pytest.fixture
def ok_result() -> CommandResult:
    """A successful command result."""
    return CommandResult(stdout="", stderr="", returncode=0)


@pytest.fixture
def operator(ok_result: CommandResult) -> MagicMock:
    """Mock APT operator where nothing is installed and every call succeeds."""
    mock = MagicMock(spec=PackageOperator)
    mock.kind = PackageManagerKind.APT
    mock.is_available.return_value = True
    mock.is_installed.return_value = False
    mock.install.return_value = ok_result
    mock.remove.return_value = ok_result
    return mock
