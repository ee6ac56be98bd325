"""Domain models for VTO.

These models carry the encoder configuration and probed stream properties
into the option builders, and the assembled options back out. All of them
are immutable; the builders never mutate their inputs.
"""

from dataclasses import dataclass

from vto.domain.enums import AudioCodec, TranscodeHWAccel, VideoCodec

# Literal value of target_resolution that disables scaling
ORIGINAL_RESOLUTION = "original"


@dataclass(frozen=True)
class FFmpegConfig:
    """User-level transcoding configuration.

    String-typed fields are kept exactly as entered. Bitrate units and the
    preset name are passed through to FFmpeg, so they are parsed lazily by
    the option builders rather than normalized here.
    """

    target_video_codec: VideoCodec = VideoCodec.H264
    target_audio_codec: AudioCodec = AudioCodec.AAC
    preset: str = "ultrafast"  # veryslow ... ultrafast
    crf: int = 23
    max_bitrate: str = ""  # e.g. "2000k", "5M", "" (unconstrained)
    two_pass: bool = False
    target_resolution: str = "720"  # "original" or pixel count of short side
    threads: int = 0  # 0 = let the encoder decide
    accel: TranscodeHWAccel = TranscodeHWAccel.DISABLED


@dataclass(frozen=True)
class VideoStreamInfo:
    """Properties of the probed video stream."""

    height: int
    width: int
    rotation: int = 0  # Signed degrees from the display matrix


@dataclass(frozen=True)
class BitrateDistribution:
    """Bitrate targets derived from the configured maximum bitrate."""

    max: int
    target: int
    min: float  # target / 2, may be fractional
    unit: str  # "k", "M", or "" (bits per second)


@dataclass(frozen=True)
class TranscodeOptions:
    """FFmpeg options for one transcode.

    input_options go before the input file, output_options before the
    output file. Each element is a complete "flag value" string. Order is
    significant: later flags may override earlier ones.
    """

    input_options: tuple[str, ...] = ()
    output_options: tuple[str, ...] = ()
    two_pass: bool = False
    """True if the caller must run a two-pass encode."""

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "input_options": list(self.input_options),
            "output_options": list(self.output_options),
            "two_pass": self.two_pass,
        }
