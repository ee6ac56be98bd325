"""Pydantic models for validating configuration input.

Values from the config file, environment and CLI are merged into a plain
dict and validated here before being converted to the dataclasses in
vto.config.models and vto.domain.

Only structural problems are rejected. The preset name and max bitrate
stay free-form strings: option building degrades gracefully on values it
does not recognize.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from vto.config.models import LoggingConfig, VTOConfig
from vto.domain import (
    ORIGINAL_RESOLUTION,
    AudioCodec,
    FFmpegConfig,
    TranscodeHWAccel,
    VideoCodec,
)

_RESOLUTION_PATTERN = re.compile(r"^\d+p?$")


class ConfigError(Exception):
    """Error loading or validating configuration."""

    pass


class FFmpegConfigModel(BaseModel):
    """Pydantic model for the [ffmpeg] section."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_video_codec: VideoCodec = VideoCodec.H264
    target_audio_codec: AudioCodec = AudioCodec.AAC
    preset: str = "ultrafast"
    crf: int = Field(default=23, ge=0, le=51)
    max_bitrate: str = ""
    two_pass: bool = False
    target_resolution: str = "720"
    threads: int = Field(default=0, ge=0)
    accel: TranscodeHWAccel = TranscodeHWAccel.DISABLED

    @field_validator("max_bitrate", "target_resolution", mode="before")
    @classmethod
    def coerce_number(cls, v: Any) -> Any:
        """Accept bare YAML numbers (max_bitrate: 2000, target_resolution: 720)."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("target_resolution")
    @classmethod
    def validate_target_resolution(cls, v: str) -> str:
        """Validate target resolution."""
        if v != ORIGINAL_RESOLUTION and not _RESOLUTION_PATTERN.match(v):
            raise ValueError(
                f"Invalid target_resolution '{v}'. "
                f"Must be '{ORIGINAL_RESOLUTION}' or a pixel count (e.g., '720')."
            )
        return v

    def to_config(self) -> FFmpegConfig:
        """Convert to the immutable domain configuration."""
        return FFmpegConfig(**self.model_dump())


class LoggingConfigModel(BaseModel):
    """Pydantic model for the [logging] section."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: Literal["debug", "info", "warning", "error"] = "info"
    file: Path | None = None
    format: Literal["text", "json"] = "text"
    include_stderr: bool = False
    max_bytes: int = Field(default=10_485_760, gt=0)
    backup_count: int = Field(default=5, ge=0)

    @field_validator("level", "format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any) -> Any:
        """Accept any capitalization (INFO, Json)."""
        if isinstance(v, str):
            return v.casefold()
        return v

    def to_config(self) -> LoggingConfig:
        """Convert to LoggingConfig."""
        data = self.model_dump()
        if data["file"] is not None:
            data["file"] = Path(data["file"]).expanduser()
        return LoggingConfig(**data)


class VTOConfigModel(BaseModel):
    """Pydantic model for the whole configuration file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ffmpeg: FFmpegConfigModel = Field(default_factory=FFmpegConfigModel)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)

    def to_config(self) -> VTOConfig:
        """Convert to VTOConfig."""
        return VTOConfig(
            ffmpeg=self.ffmpeg.to_config(),
            logging=self.logging.to_config(),
        )


def format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error into a user-friendly message."""
    errors = error.errors()
    if errors:
        first_error = errors[0]
        loc = ".".join(str(x) for x in first_error.get("loc", []))
        msg = first_error.get("msg", str(error))
        if loc:
            return f"Configuration validation failed: {loc}: {msg}"
        return f"Configuration validation failed: {msg}"

    return f"Configuration validation failed: {error}"
