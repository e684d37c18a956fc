"""Unit tests for the tmux configuration writer."""

from pathlib import Path

import pytest
from tmuxctl.core.tmux_conf import (
    load_template,
    remove_tmux_conf,
    render_tmux_conf,
    write_tmux_conf,
)


class TestTemplate:
    """Tests for the bundled template."""

    def test_template_sets_prefix_and_terminal(self) -> None:
        """The template rebinds the prefix and uses tmux-256color."""
        template = load_template()

        assert "set -g prefix C-a" in template
        assert 'set -g default-terminal "tmux-256color"' in template

    def test_template_declares_plugins(self) -> None:
        """The template declares TPM plugins and runs TPM last."""
        template = load_template()

        for plugin in ("tpm", "tmux-sensible", "tmux-resurrect", "tmux-continuum"):
            assert f"set -g @plugin 'tmux-plugins/{plugin}'" in template
        assert template.rstrip().endswith("run '~/.tmux/plugins/tpm/tpm'")

    def test_template_copies_with_xclip(self) -> None:
        """Copy mode pipes to xclip."""
        assert "xclip -selection clipboard -i" in load_template()


class TestRenderTmuxConf:
    """Tests for render_tmux_conf."""

    def test_default_paths_keep_template(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The default locations render the template unchanged."""
        monkeypatch.setenv("HOME", str(tmp_path))

        text = render_tmux_conf(tmp_path / ".tmux.conf", tmp_path / ".tmux" / "plugins" / "tpm")

        assert text == load_template()

    def test_custom_paths_are_substituted(self, tmp_path: Path) -> None:
        """The reload binding and TPM run line follow configured paths."""
        conf = tmp_path / "cfg" / "tmux.conf"
        plugin_dir = tmp_path / "plugins" / "tpm"

        text = render_tmux_conf(conf, plugin_dir)

        assert f"bind r source-file {conf} \\;" in text
        assert text.rstrip().endswith(f"run {plugin_dir / 'tpm'}")
        assert "~/.tmux.conf" not in text
        assert "~/.tmux/plugins/tpm/tpm" not in text

    def test_paths_with_spaces_are_quoted(self, tmp_path: Path) -> None:
        """Paths are quoted for tmux's command parser."""
        conf = tmp_path / "my config" / "tmux.conf"

        text = render_tmux_conf(conf)

        assert f"source-file '{conf}'" in text
        assert "run '~/.tmux/plugins/tpm/tpm'" in text


class TestWriteTmuxConf:
    """Tests for write_tmux_conf and remove_tmux_conf."""

    def test_writes_rendered_template(self, tmp_path: Path) -> None:
        """write_tmux_conf writes the rendered template, creating directories."""
        path = tmp_path / "nested" / ".tmux.conf"
        plugin_dir = tmp_path / "tpm"

        write_tmux_conf(path, plugin_dir)

        assert path.read_text() == render_tmux_conf(path, plugin_dir)

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        """An existing configuration is replaced."""
        path = tmp_path / ".tmux.conf"
        path.write_text("set -g mouse off\n")

        write_tmux_conf(path)

        assert "set -g mouse off\n" != path.read_text()
        assert "set -g prefix C-a" in path.read_text()

    def test_remove(self, tmp_path: Path) -> None:
        """remove_tmux_conf deletes the file once."""
        path = write_tmux_conf(tmp_path / ".tmux.conf")

        assert remove_tmux_conf(path) is True
        assert not path.exists()
        assert remove_tmux_conf(path) is False
