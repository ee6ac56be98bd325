"""Domain enums for VTO.

This module contains the enums shared by the configuration layer, the option
builders and the CLI.
"""

from enum import Enum


class VideoCodec(Enum):
    """Target video codec."""

    H264 = "h264"
    HEVC = "hevc"
    VP9 = "vp9"


class AudioCodec(Enum):
    """Target audio codec (FFmpeg encoder name)."""

    MP3 = "mp3"
    AAC = "aac"
    LIBOPUS = "libopus"


class TranscodeHWAccel(Enum):
    """Hardware acceleration mode for video encoding."""

    NVENC = "nvenc"  # NVIDIA NVENC
    QSV = "qsv"  # Intel Quick Sync Video
    VAAPI = "vaapi"  # VA-API (Linux AMD/Intel)
    DISABLED = "disabled"  # CPU encoding


class EncoderBackend(Enum):
    """Encoder backend an option handler is built for.

    Software backends are named after the codec they encode, hardware
    backends after the acceleration API.
    """

    H264 = "h264"
    HEVC = "hevc"
    VP9 = "vp9"
    NVENC = "nvenc"
    QSV = "qsv"
    VAAPI = "vaapi"

    @property
    def is_hardware(self) -> bool:
        """True for hardware-accelerated backends."""
        return self in (EncoderBackend.NVENC, EncoderBackend.QSV, EncoderBackend.VAAPI)
