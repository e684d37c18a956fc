"""Utility modules for tmuxctl.

This module exports commonly used utility functions.
"""

from tmuxctl.utils.formatting import (
    console,
    create_records_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from tmuxctl.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_records_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
