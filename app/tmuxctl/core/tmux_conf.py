"""tmux configuration file writer.

The configuration is a fixed template shipped as package data
(tmuxctl/data/tmux.conf) and is rewritten on every install. The template
refers to the default locations of the config file and the plugin
manager; those references are rewritten when either is configured
elsewhere.
"""

import logging
import shlex
from importlib import resources
from pathlib import Path

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "tmux.conf"

DEFAULT_CONF = "~/.tmux.conf"
DEFAULT_PLUGIN_DIR = "~/.tmux/plugins/tpm"

_RELOAD_LINE = f"source-file {DEFAULT_CONF}"
_RUN_LINE = f"run '{DEFAULT_PLUGIN_DIR}/tpm'"


def load_template() -> str:
    """Read the bundled tmux.conf template.

    Returns:
        The template text.
    """
    return resources.files("tmuxctl.data").joinpath(TEMPLATE_NAME).read_text(encoding="utf-8")


def render_tmux_conf(path: Path, plugin_dir: Path | None = None) -> str:
    """Render the template for the given locations.

    Args:
        path: Where the configuration will be written.
        plugin_dir: Plugin manager checkout. None keeps the default.

    Returns:
        Configuration text. Identical to the template for default paths.
    """
    text = load_template()
    if path != Path(DEFAULT_CONF).expanduser():
        text = text.replace(_RELOAD_LINE, f"source-file {shlex.quote(str(path))}")
    if plugin_dir is not None and plugin_dir != Path(DEFAULT_PLUGIN_DIR).expanduser():
        text = text.replace(_RUN_LINE, f"run {shlex.quote(str(plugin_dir / 'tpm'))}")
    return text


def write_tmux_conf(path: Path, plugin_dir: Path | None = None) -> Path:
    """Overwrite the tmux configuration file with the rendered template.

    Parent directories are created as needed. Any existing file is
    replaced without a backup.

    Args:
        path: Destination, normally ~/.tmux.conf.
        plugin_dir: Plugin manager checkout the config should load.

    Returns:
        The path written.

    Raises:
        OSError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_tmux_conf(path, plugin_dir), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path


def remove_tmux_conf(path: Path) -> bool:
    """Delete the tmux configuration file if present.

    Args:
        path: The configuration file.

    Returns:
        True if the file was deleted, False if it did not exist.

    Raises:
        OSError: If the file exists but cannot be deleted.
    """
    if not path.is_file():
        return False
    path.unlink()
    logger.info("Removed %s", path)
    return True
