"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (config, input)
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for VTO CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    INTERRUPTED = 2

    # Validation errors (10-19)
    CONFIG_ERROR = 11
    INVALID_CONFIGURATION = 12  # Config loaded but cannot be turned into options
    UNSUPPORTED_CODEC = 13
