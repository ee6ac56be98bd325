"""CLI module for VTO."""

import logging
from pathlib import Path

import click

from vto.config import ConfigError, LoggingConfig, build_logging_config, get_config
from vto.logging import configure_logging

logger = logging.getLogger(__name__)


def _configure_logging(
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    log_stderr: bool,
) -> None:
    """Configure logging from the config file with CLI overrides.

    A config that fails to load is not reported here: logging falls back to
    the defaults plus CLI flags, and commands that read the config report
    the error in their own output format.

    Args:
        config_path: Config file path (None uses default location).
        log_level: Override log level (debug, info, warning, error).
        log_file: Override log file path.
        log_json: Use JSON log format.
        log_stderr: Also log to stderr when logging to a file.
    """
    config_error = None
    try:
        base = get_config(config_path).logging
    except ConfigError as e:
        base = LoggingConfig()
        config_error = e

    logging_config = build_logging_config(
        base,
        level=log_level,
        file=log_file,
        format="json" if log_json else None,
        include_stderr=True if log_stderr else None,
    )
    configure_logging(logging_config)

    if config_error is not None:
        logger.debug("Logging configured from defaults: %s", config_error)


@click.group()
@click.version_option(package_name="vto")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file path (default: $VTO_CONFIG_PATH or ~/.vto/config.yaml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.option(
    "--log-stderr",
    is_flag=True,
    default=False,
    help="Also log to stderr when --log-file is set.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    log_stderr: bool,
) -> None:
    """VTO - Build FFmpeg transcode options for software and hardware encoders."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    _configure_logging(config_path, log_level, log_file, log_json, log_stderr)
    logger.debug("Config path: %s", config_path or "default")


# Defer import to avoid circular dependency
def _register_commands():
    from vto.cli.backends import backends_command
    from vto.cli.options import options_command

    main.add_command(backends_command)
    main.add_command(options_command)


_register_commands()
