"""tmuxctl - idempotent installer and uninstaller for a tmux setup."""

__version__ = "0.1.0"
