"""Exception hierarchy for tmuxctl.

Library code raises these; CLI commands turn them into an error message
and exit code 1.
"""


class TmuxctlError(Exception):
    """Base exception for tmuxctl errors."""


class PackageManagerNotFoundError(TmuxctlError):
    """Raised when no supported package manager is found on the host."""


class PackageInstallError(TmuxctlError):
    """Raised when the package manager fails to install a package."""


class GitNotFoundError(TmuxctlError):
    """Raised when git is needed but not installed."""


class PluginBootstrapError(TmuxctlError):
    """Raised when the plugin manager cannot be cloned."""


class ConfigError(TmuxctlError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""
