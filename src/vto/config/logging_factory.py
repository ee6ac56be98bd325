"""Apply command-line logging flags on top of the configured logging section."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from vto.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return a copy of base with every non-None flag applied.

    Rotation settings have no flags and always come from base. The copy is
    re-validated, so a bad level or format raises ValueError.
    """
    flags = {
        "level": level,
        "file": file,
        "format": format,
        "include_stderr": include_stderr,
    }
    return dataclasses.replace(
        base, **{name: value for name, value in flags.items() if value is not None}
    )
