"""Core install, uninstall and state tracking logic."""
