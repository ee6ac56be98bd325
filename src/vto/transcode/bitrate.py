"""Bitrate distribution and two-pass eligibility.

The configured maximum bitrate is a free-form string such as "2000k", "5M"
or "" (unconstrained). These functions parse it leniently: anything that
does not start with an integer means "no bitrate cap" rather than an error.
"""

from __future__ import annotations

import math
import re

from vto.domain import BitrateDistribution, FFmpegConfig, VideoCodec

# Leading (optionally signed) integer followed by whatever the user typed
_BITRATE_PATTERN = re.compile(r"([+-]?\d+)(.*)", re.DOTALL)

# Ratio of max bitrate to average bitrate for two-pass VOD encodes,
# see https://developers.google.com/media/vp9/settings/vod
MAX_TO_TARGET_RATIO = 1.45


def _split_max_bitrate(config: FFmpegConfig) -> tuple[int, str]:
    match = _BITRATE_PATTERN.fullmatch(config.max_bitrate.strip())
    if match is None:
        return 0, ""
    return int(match.group(1)), match.group(2)


def get_max_bitrate_value(config: FFmpegConfig) -> int:
    """Get the numeric part of the configured max bitrate.

    Args:
        config: FFmpeg configuration.

    Returns:
        Leading integer of max_bitrate, or 0 if there is none.
    """
    return _split_max_bitrate(config)[0]


def get_bitrate_unit(config: FFmpegConfig) -> str:
    """Get the unit suffix of the configured max bitrate.

    The suffix is passed through unchanged so that FFmpeg sees exactly
    what the user configured ("k", "M", ...).

    Args:
        config: FFmpeg configuration.

    Returns:
        Text following the leading integer, or "" (bits per second).
    """
    return _split_max_bitrate(config)[1]


def is_bitrate_constrained(config: FFmpegConfig) -> bool:
    """True if a positive max bitrate is configured."""
    return get_max_bitrate_value(config) > 0


def get_bitrate_distribution(config: FFmpegConfig) -> BitrateDistribution:
    """Derive max/target/min bitrates from the configured max bitrate.

    Target leaves headroom below the cap so that a two-pass average stays
    under it; min is half the target. An unconstrained config yields all
    zeros, which callers treat as "no explicit bitrate control".

    Args:
        config: FFmpeg configuration.

    Returns:
        BitrateDistribution in the configured unit.
    """
    max_value = get_max_bitrate_value(config)
    target = math.ceil(max_value / MAX_TO_TARGET_RATIO)
    return BitrateDistribution(
        max=max_value,
        target=target,
        min=target / 2,
        unit=get_bitrate_unit(config),
    )


def format_bitrate(value: int | float, unit: str) -> str:
    """Render a bitrate for the FFmpeg command line.

    Integral values are written without a decimal point ("690k", not
    "690.0k").

    Args:
        value: Numeric bitrate.
        unit: Unit suffix to append.

    Returns:
        Bitrate string, e.g. "1380k".
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{unit}"


def eligible_for_two_pass(config: FFmpegConfig) -> bool:
    """Check whether a two-pass encode should be performed.

    Two-pass needs a bitrate to aim for, except for VP9 whose constant
    quality mode also benefits from a first pass.

    Args:
        config: FFmpeg configuration.

    Returns:
        True if two-pass is enabled and applicable.
    """
    if not config.two_pass:
        return False

    return (
        is_bitrate_constrained(config) or config.target_video_codec == VideoCodec.VP9
    )
