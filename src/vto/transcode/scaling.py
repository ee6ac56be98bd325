"""Scaling decisions for the video stream.

Target resolution refers to the short side of the frame, so a 720 target
turns 1920x1080 into 1280x720 and 1080x1920 into 720x1280. Videos are never
upscaled.
"""

from __future__ import annotations

import re

from vto.domain import ORIGINAL_RESOLUTION, FFmpegConfig, VideoStreamInfo
from vto.transcode.exceptions import InvalidConfigurationError

_RESOLUTION_PATTERN = re.compile(r"\s*([+-]?\d+)")


def _parse_target_resolution(config: FFmpegConfig) -> int:
    """Parse a numeric target resolution ("720", "1080p").

    Raises:
        InvalidConfigurationError: If the value does not start with a number.
    """
    match = _RESOLUTION_PATTERN.match(config.target_resolution)
    if match is None:
        raise InvalidConfigurationError(
            "target_resolution",
            config.target_resolution,
            f"expected '{ORIGINAL_RESOLUTION}' or a number of pixels",
        )
    return int(match.group(1))


def get_target_resolution(stream: VideoStreamInfo, config: FFmpegConfig) -> int:
    """Get the short-side resolution to encode at.

    Args:
        stream: Probed video stream.
        config: FFmpeg configuration.

    Returns:
        The stream's current short side for "original", else the configured
        target.

    Raises:
        InvalidConfigurationError: If target_resolution is not numeric.
    """
    if config.target_resolution == ORIGINAL_RESOLUTION:
        return min(stream.height, stream.width)

    return _parse_target_resolution(config)


def should_scale(stream: VideoStreamInfo, config: FFmpegConfig) -> bool:
    """True if the stream's short side exceeds the target resolution.

    Raises:
        InvalidConfigurationError: If target_resolution is not numeric.
    """
    if config.target_resolution == ORIGINAL_RESOLUTION:
        return False
    return min(stream.height, stream.width) > _parse_target_resolution(config)


def is_video_rotated(stream: VideoStreamInfo) -> bool:
    """True if the stream is displayed rotated by a quarter turn."""
    return abs(stream.rotation) == 90


def is_video_vertical(stream: VideoStreamInfo) -> bool:
    """True if the video is displayed in portrait orientation.

    Rotation metadata can make a landscape-stored frame display vertically.
    """
    return stream.height > stream.width or is_video_rotated(stream)


def get_scaling(stream: VideoStreamInfo, config: FFmpegConfig) -> str:
    """Build the width:height argument for a scale filter.

    The constrained side is set to the target resolution; the other side is
    -2 so FFmpeg keeps the aspect ratio and rounds to an even size.

    Args:
        stream: Probed video stream.
        config: FFmpeg configuration.

    Returns:
        "target:-2" for vertical videos, "-2:target" otherwise.
    """
    target_resolution = get_target_resolution(stream, config)
    if is_video_vertical(stream):
        return f"{target_resolution}:-2"
    return f"-2:{target_resolution}"
