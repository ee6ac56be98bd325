"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building VTOConfig by composing
multiple configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vto.config.env import EnvReader
from vto.config.models import VTOConfig
from vto.config.schema import ConfigError, VTOConfigModel, format_validation_error


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources. Values are kept raw
    (strings from the environment, YAML scalars from the file) and
    validated once by ConfigBuilder.build().
    """

    # FFmpeg config
    target_video_codec: str | None = None
    target_audio_codec: str | None = None
    preset: str | None = None
    crf: int | None = None
    max_bitrate: str | None = None
    two_pass: bool | None = None
    target_resolution: str | None = None
    threads: int | None = None
    accel: str | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


_LOGGING_PREFIX = "logging_"


class ConfigBuilder:
    """Builds VTOConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        """Initialize the builder with no values set."""
        self._values: dict[str, Any] = {}

    def apply(self, source: ConfigSource) -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value

    def build(self) -> VTOConfig:
        """Validate the accumulated values and build the final VTOConfig.

        Returns:
            Complete VTOConfig with defaults for unset values.

        Raises:
            ConfigError: If any value fails validation.
        """
        ffmpeg: dict[str, Any] = {}
        logging_section: dict[str, Any] = {}
        for key, value in self._values.items():
            if key.startswith(_LOGGING_PREFIX):
                logging_section[key[len(_LOGGING_PREFIX) :]] = value
            else:
                ffmpeg[key] = value

        try:
            model = VTOConfigModel.model_validate(
                {"ffmpeg": ffmpeg, "logging": logging_section}
            )
        except ValidationError as e:
            raise ConfigError(format_validation_error(e)) from e

        return model.to_config()


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create ConfigSource from a parsed config file.

    Args:
        file_config: Parsed YAML config file contents.

    Returns:
        ConfigSource with values from the file.

    Raises:
        ConfigError: If the file contains unknown sections or keys, or
            invalid values.
    """
    try:
        model = VTOConfigModel.model_validate(file_config)
    except ValidationError as e:
        raise ConfigError(format_validation_error(e)) from e

    # Only carry keys the file actually set, so defaults don't mask env/CLI
    ffmpeg = model.ffmpeg.model_dump(mode="json", exclude_unset=True)
    logging_section = model.logging.model_dump(exclude_unset=True)

    return ConfigSource(
        **ffmpeg,
        **{_LOGGING_PREFIX + key: value for key, value in logging_section.items()},
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create ConfigSource from environment variables.

    Args:
        reader: EnvReader instance for reading environment variables.

    Returns:
        ConfigSource with values from environment.
    """
    return ConfigSource(
        target_video_codec=reader.get_str("VTO_TARGET_VIDEO_CODEC"),
        preset=reader.get_str("VTO_PRESET"),
        max_bitrate=reader.get_str("VTO_MAX_BITRATE"),
        two_pass=reader.get_bool("VTO_TWO_PASS"),
        threads=reader.get_int("VTO_THREADS"),
        accel=reader.get_str("VTO_ACCEL"),
        logging_level=reader.get_str("VTO_LOG_LEVEL"),
        logging_file=reader.get_path("VTO_LOG_FILE"),
        logging_format=reader.get_str("VTO_LOG_FORMAT"),
    )
