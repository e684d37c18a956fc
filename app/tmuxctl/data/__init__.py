"""Bundled data files for tmuxctl."""
