"""FFmpeg option building for video transcoding.

Module organization:
- bitrate.py: Bitrate distribution and two-pass eligibility
- presets.py: Preset ranking shared by all backends
- scaling.py: Downscale decision and scale filter arguments
- handlers.py: One option handler per encoder backend
- selection.py: Backend selection and option assembly entry point
- exceptions.py: Error types

Usage:
    from vto.transcode import build_transcode_options
    options = build_transcode_options(config, stream)
"""

from .bitrate import (
    eligible_for_two_pass,
    format_bitrate,
    get_bitrate_distribution,
    get_bitrate_unit,
    get_max_bitrate_value,
    is_bitrate_constrained,
)
from .exceptions import (
    InvalidConfigurationError,
    TranscodeError,
    UnsupportedCodecError,
)
from .handlers import (
    BaseHandler,
    H264Handler,
    HEVCHandler,
    NVENCHandler,
    QSVHandler,
    VAAPIHandler,
    VideoCodecHandler,
    VP9Handler,
)
from .presets import PRESET_RANKING, get_preset_index
from .scaling import (
    get_scaling,
    get_target_resolution,
    is_video_rotated,
    is_video_vertical,
    should_scale,
)
from .selection import (
    HANDLERS,
    build_transcode_options,
    get_handler,
    resolve_backend,
    supported_codecs,
)

__all__ = [
    # Bitrate
    "eligible_for_two_pass",
    "format_bitrate",
    "get_bitrate_distribution",
    "get_bitrate_unit",
    "get_max_bitrate_value",
    "is_bitrate_constrained",
    # Presets
    "PRESET_RANKING",
    "get_preset_index",
    # Scaling
    "get_scaling",
    "get_target_resolution",
    "is_video_rotated",
    "is_video_vertical",
    "should_scale",
    # Handlers
    "VideoCodecHandler",
    "BaseHandler",
    "H264Handler",
    "HEVCHandler",
    "VP9Handler",
    "NVENCHandler",
    "QSVHandler",
    "VAAPIHandler",
    # Selection
    "HANDLERS",
    "build_transcode_options",
    "get_handler",
    "resolve_backend",
    "supported_codecs",
    # Exceptions
    "TranscodeError",
    "InvalidConfigurationError",
    "UnsupportedCodecError",
]
