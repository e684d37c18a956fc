"""Allow running tmuxctl as ``python -m tmuxctl``."""

from tmuxctl.cli.main import app

if __name__ == "__main__":
    app()
