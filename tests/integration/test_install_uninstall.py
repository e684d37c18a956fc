"""Install followed by uninstall against a fake host.

Package managers, terminfo tools and the network are mocked; the config
file, plugin directory and state file are real files under tmp_path.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from tmuxctl.cli.main import app
from tmuxctl.core.config import InstallerConfig, save_config
from tmuxctl.core.state import StateManager
from typer.testing import CliRunner

runner = CliRunner()


def _fake_clone(repo_url: str, target: Path) -> bool:
    """Stand-in for git clone that creates a TPM-like checkout."""
    if target.is_dir():
        return False
    entry = target / "bin" / "install_plugins"
    entry.parent.mkdir(parents=True)
    entry.write_text("#!/bin/sh\nexit 0\n")
    entry.chmod(0o755)
    return True


@pytest.fixture
def fake_host(operator: MagicMock):
    """Patch every external tool the installer touches."""
    with (
        patch("tmuxctl.cli.commands.install.detect_operator", return_value=operator),
        patch("tmuxctl.cli.commands.uninstall.detect_operator", return_value=operator),
        patch("tmuxctl.core.terminfo.terminfo_exists", return_value=False),
        patch("tmuxctl.core.terminfo.compile_terminfo", return_value=True),
        patch("tmuxctl.core.terminfo.remove_terminfo") as remove_terminfo,
        patch("tmuxctl.core.plugins.command_exists", return_value=True),
        patch("tmuxctl.core.plugins.clone_plugin_manager", side_effect=_fake_clone),
        patch("tmuxctl.core.plugins.run_command") as run_plugins,
    ):
        run_plugins.return_value.success = True
        yield {"operator": operator, "remove_terminfo": remove_terminfo}


@pytest.fixture
def config_file(tmp_path: Path, config: InstallerConfig) -> Path:
    """Config file whose paths all live under tmp_path."""
    return save_config(config, tmp_path / "config.toml")


class TestInstallUninstall:
    """Round trip through both commands."""

    def test_uninstall_restores_pre_install_state(
        self,
        fake_host: dict[str, MagicMock],
        config_file: Path,
        config: InstallerConfig,
        state: StateManager,
    ) -> None:
        """Everything install recorded is gone after uninstall."""
        operator = fake_host["operator"]
        operator.is_installed.side_effect = lambda pkg: pkg == "git"

        result = runner.invoke(app, ["install", "--config", str(config_file)])
        assert result.exit_code == 0, result.output
        assert config.tmux_conf.exists()
        assert config.plugin_dir.is_dir()
        assert [r.package for r in state.read_records() if r.package] == ["tmux", "xclip"]
        script = state.state_path.parent / "uninstall_tmux.sh"
        assert script.exists()

        result = runner.invoke(app, ["uninstall", "--config", str(config_file), "--yes"])
        assert result.exit_code == 0, result.output

        assert not config.tmux_conf.exists()
        assert not config.plugin_dir.exists()
        assert not state.exists()
        assert not script.exists()
        assert [c.args[0] for c in operator.remove.call_args_list] == ["tmux", "xclip"]
        fake_host["remove_terminfo"].assert_called_once_with("tmux-256color")

    def test_reinstall_then_uninstall(
        self,
        fake_host: dict[str, MagicMock],
        config_file: Path,
        config: InstallerConfig,
        state: StateManager,
    ) -> None:
        """Installing twice duplicates only the config sentinel; uninstall still cleans up."""
        operator = fake_host["operator"]
        installed: set[str] = set()
        operator.is_installed.side_effect = lambda pkg: pkg in installed

        def _install(pkg: str):
            installed.add(pkg)
            return MagicMock(success=True)

        operator.install.side_effect = _install

        for _ in range(2):
            result = runner.invoke(app, ["install", "--config", str(config_file)])
            assert result.exit_code == 0, result.output

        lines = state.state_path.read_text().splitlines()
        assert lines.count("__wrote_tmux_conf") == 2
        assert lines.count("tmux") == 1
        assert lines.count("__cloned_tpm") == 1

        result = runner.invoke(app, ["uninstall", "--config", str(config_file), "-y"])

        assert result.exit_code == 0, result.output
        assert not state.exists()
        assert not config.tmux_conf.exists()
