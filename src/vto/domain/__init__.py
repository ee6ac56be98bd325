"""Domain models and enums for VTO.

- Domain models: FFmpegConfig, VideoStreamInfo, BitrateDistribution,
  TranscodeOptions
- Domain enums: VideoCodec, AudioCodec, TranscodeHWAccel, EncoderBackend

Usage:
    from vto.domain import FFmpegConfig, VideoStreamInfo, VideoCodec
"""

from .enums import (
    AudioCodec,
    EncoderBackend,
    TranscodeHWAccel,
    VideoCodec,
)
from .models import (
    ORIGINAL_RESOLUTION,
    BitrateDistribution,
    FFmpegConfig,
    TranscodeOptions,
    VideoStreamInfo,
)

__all__ = [
    # Models
    "FFmpegConfig",
    "VideoStreamInfo",
    "BitrateDistribution",
    "TranscodeOptions",
    "ORIGINAL_RESOLUTION",
    # Enums
    "VideoCodec",
    "AudioCodec",
    "TranscodeHWAccel",
    "EncoderBackend",
]
