"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed as an override ConfigSource)
2. Environment variables (VTO_*)
3. Config file (~/.vto/config.yaml)
4. Default values

Environment variables:
- VTO_CONFIG_PATH: Path to config file (overrides default location)
- VTO_TARGET_VIDEO_CODEC: Target video codec (h264, hevc, vp9)
- VTO_PRESET: Encoder preset name
- VTO_MAX_BITRATE: Max bitrate, e.g. "2000k" (empty = unconstrained)
- VTO_TWO_PASS: Two-pass encoding when constrained (true/false)
- VTO_THREADS: Encoder thread count (0 = encoder default)
- VTO_ACCEL: Hardware acceleration (nvenc, qsv, vaapi, disabled)
- VTO_LOG_LEVEL: Log level (debug, info, warning, error)
- VTO_LOG_FILE: Log file path
- VTO_LOG_FORMAT: Log format (text, json)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from vto.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from vto.config.env import EnvReader
from vto.config.models import VTOConfig
from vto.config.schema import ConfigError

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".vto"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"


def get_default_config_path(env: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by VTO_CONFIG_PATH environment variable.

    Args:
        env: EnvReader to read from (defaults to os.environ).

    Returns:
        Path to config file.
    """
    reader = env if env is not None else EnvReader()
    env_path = reader.get_path("VTO_CONFIG_PATH")
    if env_path is not None:
        return env_path
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        path: Path to config file.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist or
        is empty.

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping.
    """
    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must be a YAML mapping")

    return data


def get_config(
    config_path: Path | None = None,
    *,
    env: EnvReader | None = None,
    overrides: ConfigSource | None = None,
) -> VTOConfig:
    """Load configuration from all sources with precedence.

    Args:
        config_path: Path to config file. If None, uses default location.
        env: EnvReader for environment variables (defaults to os.environ).
        overrides: CLI overrides, applied last.

    Returns:
        Merged and validated VTOConfig.

    Raises:
        ConfigError: If any source holds an invalid value.
    """
    reader = env if env is not None else EnvReader()
    if config_path is None:
        config_path = get_default_config_path(reader)

    builder = ConfigBuilder()
    builder.apply(source_from_file(load_config_file(config_path)))
    builder.apply(source_from_env(reader))
    if overrides is not None:
        builder.apply(overrides)

    return builder.build()
