"""Error reporting for CLI commands.

Errors go to stderr either as a one-line "Error: ..." message or, for
commands run with --format json, as a JSON document:

    {"status": "failed", "error": {"code": "UNSUPPORTED_CODEC", "message": ...}}
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from vto.cli.exit_codes import ExitCode
from vto.config import ConfigError
from vto.transcode import (
    InvalidConfigurationError,
    TranscodeError,
    UnsupportedCodecError,
)

# Most specific first; exit_code_for() takes the first isinstance match
_ERROR_EXIT_CODES: tuple[tuple[type[Exception], ExitCode], ...] = (
    (ConfigError, ExitCode.CONFIG_ERROR),
    (UnsupportedCodecError, ExitCode.UNSUPPORTED_CODEC),
    (InvalidConfigurationError, ExitCode.INVALID_CONFIGURATION),
    (TranscodeError, ExitCode.GENERAL_ERROR),
)


def exit_code_for(error: Exception) -> ExitCode:
    """Map an error raised while building options to its exit code."""
    for error_type, code in _ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.GENERAL_ERROR


def format_error(message: str, code: ExitCode | int, json_output: bool) -> str:
    """Render an error message for stderr.

    Plain ints have no symbolic name and are reported as UNKNOWN_ERROR in
    JSON output.
    """
    if not json_output:
        return f"Error: {message}"
    name = code.name if isinstance(code, ExitCode) else "UNKNOWN_ERROR"
    return json.dumps(
        {"status": "failed", "error": {"code": name, "message": message}}
    )


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Print the error to stderr and exit with code."""
    click.echo(format_error(message, code, json_output), err=True)
    sys.exit(int(code))
