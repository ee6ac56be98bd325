"""Per-backend FFmpeg option handlers.

Each handler turns an FFmpegConfig and a VideoStreamInfo into the options
for one encoder backend. BaseHandler.get_options composes the pieces in a
fixed order:

1. input options (hardware device setup, empty for software encoders)
2. base output options (codecs, faststart, frame rate passthrough)
3. filter options (scaling, hardware upload)
4. preset options
5. thread options
6. bitrate options

Handlers only override the pieces where their backend differs. The order
within the output options matters: FFmpeg lets later flags override
earlier ones.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

from vto.domain import (
    BitrateDistribution,
    EncoderBackend,
    FFmpegConfig,
    TranscodeOptions,
    VideoCodec,
    VideoStreamInfo,
)
from vto.transcode.bitrate import (
    eligible_for_two_pass,
    format_bitrate,
    get_bitrate_distribution,
)
from vto.transcode.presets import get_preset_index
from vto.transcode.scaling import get_scaling, should_scale

logger = logging.getLogger(__name__)


@runtime_checkable
class VideoCodecHandler(Protocol):
    """Protocol for backend option handlers."""

    backend: ClassVar[EncoderBackend]
    supported_codecs: ClassVar[tuple[VideoCodec, ...]]
    config: FFmpegConfig

    def __init__(self, config: FFmpegConfig) -> None: ...

    def supports(self, codec: VideoCodec) -> bool: ...

    def get_options(self, stream: VideoStreamInfo) -> TranscodeOptions:
        """Assemble the full option set for a stream."""
        ...

    def get_base_input_options(self) -> list[str]: ...

    def get_base_output_options(self) -> list[str]: ...

    def get_filter_options(self, stream: VideoStreamInfo) -> list[str]: ...

    def get_preset_options(self) -> list[str]: ...

    def get_thread_options(self) -> list[str]: ...

    def get_bitrate_options(self) -> list[str]: ...


class BaseHandler(ABC):
    """Shared option assembly and defaults for all backends.

    Subclasses set backend and supported_codecs, and implement thread and
    bitrate options. Hardware backends also set codec_suffix so the encoder
    name becomes e.g. "hevc_nvenc".
    """

    backend: ClassVar[EncoderBackend]
    supported_codecs: ClassVar[tuple[VideoCodec, ...]]
    codec_suffix: ClassVar[str] = ""

    def __init__(self, config: FFmpegConfig) -> None:
        """Initialize the handler.

        Args:
            config: FFmpeg configuration to build options from.
        """
        self.config = config

    def supports(self, codec: VideoCodec) -> bool:
        """True if this backend can encode the given codec."""
        return codec in self.supported_codecs

    def get_options(self, stream: VideoStreamInfo) -> TranscodeOptions:
        """Assemble the full option set for a stream.

        Args:
            stream: Probed video stream.

        Returns:
            TranscodeOptions with input and output options in FFmpeg order.

        Raises:
            InvalidConfigurationError: If target_resolution is not numeric.
        """
        output_options = self.get_base_output_options()
        output_options.extend(self.get_filter_options(stream))
        output_options.extend(self.get_preset_options())
        output_options.extend(self.get_thread_options())
        output_options.extend(self.get_bitrate_options())

        options = TranscodeOptions(
            input_options=tuple(self.get_base_input_options()),
            output_options=tuple(output_options),
            two_pass=eligible_for_two_pass(self.config),
        )
        logger.debug(
            "Built %s options for %dx%d",
            self.backend.value,
            stream.width,
            stream.height,
            extra={
                "backend": self.backend.value,
                "rotation": stream.rotation,
                "input_options": list(options.input_options),
                "output_options": list(options.output_options),
                "two_pass": options.two_pass,
            },
        )
        return options

    def get_base_input_options(self) -> list[str]:
        return []

    def get_base_output_options(self) -> list[str]:
        return [
            f"-vcodec {self.config.target_video_codec.value}{self.codec_suffix}",
            f"-acodec {self.config.target_audio_codec.value}",
            # Moves the moov atom to the start of the file for faster playback
            "-movflags faststart",
            "-fps_mode passthrough",
        ]

    def get_filter_options(self, stream: VideoStreamInfo) -> list[str]:
        if not should_scale(stream, self.config):
            return []

        return [f"-vf scale={get_scaling(stream, self.config)}"]

    def get_preset_options(self) -> list[str]:
        return [f"-preset {self.config.preset}"]

    @abstractmethod
    def get_thread_options(self) -> list[str]:
        """Get encoder threading options."""

    @abstractmethod
    def get_bitrate_options(self) -> list[str]:
        """Get rate control options."""


def _two_pass_bitrate_options(bitrates: BitrateDistribution) -> list[str]:
    """Average/min/max bitrate flags shared by libx264, libx265 and libvpx."""
    return [
        f"-b:v {format_bitrate(bitrates.target, bitrates.unit)}",
        f"-minrate {format_bitrate(bitrates.min, bitrates.unit)}",
        f"-maxrate {format_bitrate(bitrates.max, bitrates.unit)}",
    ]


def _x26x_thread_options(threads: int, params_option: str) -> list[str]:
    """Thread options for libx264/libx265.

    Both the thread pool and frame threads have to be pinned for -threads
    to actually limit the encoder.
    """
    if threads <= 0:
        return []
    return [
        f"-threads {threads}",
        f'{params_option} "pools=none"',
        f'{params_option} "frame-threads={threads}"',
    ]


def _hardware_preset_rank(config: FFmpegConfig) -> int:
    """Preset rank clamped to the 7 levels hardware encoders offer, or -1."""
    preset_index = get_preset_index(config.preset)
    if preset_index < 0:
        return -1
    return min(6, preset_index)


class H264Handler(BaseHandler):
    """libx264 software encoder."""

    backend = EncoderBackend.H264
    supported_codecs = (VideoCodec.H264,)

    def get_bitrate_options(self) -> list[str]:
        bitrates = get_bitrate_distribution(self.config)
        if eligible_for_two_pass(self.config):
            return _two_pass_bitrate_options(bitrates)
        if bitrates.max > 0:
            # -bufsize is the peak possible bitrate at any moment, while -maxrate
            # is the max rolling average bitrate. -maxrate needs -bufsize.
            return [
                f"-crf {self.config.crf}",
                f"-maxrate {format_bitrate(bitrates.max, bitrates.unit)}",
                f"-bufsize {format_bitrate(bitrates.max * 2, bitrates.unit)}",
            ]
        return [f"-crf {self.config.crf}"]

    def get_thread_options(self) -> list[str]:
        return _x26x_thread_options(self.config.threads, "-x264-params")


class HEVCHandler(BaseHandler):
    """libx265 software encoder.

    Rate control is identical to libx264 and is delegated to an H264Handler
    built from the same config; only the encoder parameter option differs.
    """

    backend = EncoderBackend.HEVC
    supported_codecs = (VideoCodec.HEVC,)

    def __init__(self, config: FFmpegConfig) -> None:
        super().__init__(config)
        self._h264 = H264Handler(config)

    def get_bitrate_options(self) -> list[str]:
        return self._h264.get_bitrate_options()

    def get_thread_options(self) -> list[str]:
        return _x26x_thread_options(self.config.threads, "-x265-params")


class VP9Handler(BaseHandler):
    """libvpx-vp9 software encoder."""

    backend = EncoderBackend.VP9
    supported_codecs = (VideoCodec.VP9,)

    # -cpu-used above 5 requires realtime mode, which overrides -crf and -threads
    MAX_SPEED = 5

    def get_preset_options(self) -> list[str]:
        speed = min(get_preset_index(self.config.preset), self.MAX_SPEED)
        if speed >= 0:
            return [f"-cpu-used {speed}"]
        return []

    def get_bitrate_options(self) -> list[str]:
        bitrates = get_bitrate_distribution(self.config)
        if eligible_for_two_pass(self.config):
            return _two_pass_bitrate_options(bitrates)

        # Constrained quality: -b:v 0 means no ceiling
        return [
            f"-crf {self.config.crf}",
            f"-b:v {format_bitrate(bitrates.max, bitrates.unit)}",
        ]

    def get_thread_options(self) -> list[str]:
        if self.config.threads:
            return ["-row-mt 1", f"-threads {self.config.threads}"]
        return ["-row-mt 1"]


class NVENCHandler(BaseHandler):
    """NVIDIA NVENC hardware encoder."""

    backend = EncoderBackend.NVENC
    supported_codecs = (VideoCodec.H264, VideoCodec.HEVC)
    codec_suffix = "_nvenc"

    def get_base_input_options(self) -> list[str]:
        return ["-init_hw_device cuda=cuda:0", "-filter_hw_device cuda"]

    def get_base_output_options(self) -> list[str]:
        options = super().get_base_output_options()
        # Latency-tolerant high quality transcoding settings from
        # https://docs.nvidia.com/video-technologies/video-codec-sdk/12.0/ffmpeg-with-nvidia-gpu/
        options.extend(
            [
                "-tune hq",
                "-qmin 0",
                "-g 250",
                "-bf 3",
                "-b_ref_mode middle",
                "-temporal-aq 1",
                "-rc-lookahead 20",
                "-i_qfactor 0.75",
                "-b_qfactor 1.1",
            ]
        )
        return options

    def get_filter_options(self, stream: VideoStreamInfo) -> list[str]:
        if not should_scale(stream, self.config):
            return ["-vf hwupload"]

        return [f"-vf hwupload,scale_cuda={get_scaling(stream, self.config)}"]

    def get_preset_options(self) -> list[str]:
        rank = _hardware_preset_rank(self.config)
        if rank < 0:
            return []
        # p1-p7 where p7 is the highest quality, so the rank is reversed
        return [f"-preset p{7 - rank}"]

    def get_bitrate_options(self) -> list[str]:
        bitrates = get_bitrate_distribution(self.config)
        target = format_bitrate(bitrates.target, bitrates.unit)
        if eligible_for_two_pass(self.config):
            return [
                f"-b:v {target}",
                f"-maxrate {format_bitrate(bitrates.max, bitrates.unit)}",
                f"-bufsize {target}",
                "-multipass 2",
            ]
        if bitrates.max > 0:
            return [
                f"-cq:v {self.config.crf}",
                f"-maxrate {format_bitrate(bitrates.max, bitrates.unit)}",
                f"-bufsize {target}",
            ]
        return [f"-cq:v {self.config.crf}"]

    def get_thread_options(self) -> list[str]:
        return []


class QSVHandler(BaseHandler):
    """Intel Quick Sync Video hardware encoder."""

    backend = EncoderBackend.QSV
    supported_codecs = (VideoCodec.H264, VideoCodec.HEVC, VideoCodec.VP9)
    codec_suffix = "_qsv"

    def get_base_input_options(self) -> list[str]:
        return ["-hwaccel qsv"]

    def get_filter_options(self, stream: VideoStreamInfo) -> list[str]:
        if not should_scale(stream, self.config):
            return []

        return [f"-vf scale_qsv={get_scaling(stream, self.config)}"]

    def get_preset_options(self) -> list[str]:
        rank = _hardware_preset_rank(self.config)
        if rank < 0:
            return []
        return [f"-preset {rank + 1}"]  # 1-7

    def get_bitrate_options(self) -> list[str]:
        bitrates = get_bitrate_distribution(self.config)
        if bitrates.max > 0:
            return [
                f"-global_quality {self.config.crf}",
                f"-maxrate {format_bitrate(bitrates.max, bitrates.unit)}",
            ]
        return [f"-global_quality {self.config.crf}"]

    def get_thread_options(self) -> list[str]:
        return []


class VAAPIHandler(BaseHandler):
    """VA-API hardware encoder (Linux AMD/Intel)."""

    backend = EncoderBackend.VAAPI
    supported_codecs = (VideoCodec.H264, VideoCodec.HEVC, VideoCodec.VP9)
    codec_suffix = "_vaapi"

    def get_base_input_options(self) -> list[str]:
        return ["-hwaccel vaapi", "-hwaccel_output_format vaapi"]

    def get_filter_options(self, stream: VideoStreamInfo) -> list[str]:
        if not should_scale(stream, self.config):
            return ["-vf hwupload"]

        return [f"-vf hwupload,scale_vaapi={get_scaling(stream, self.config)}"]

    def get_preset_options(self) -> list[str]:
        rank = _hardware_preset_rank(self.config)
        if rank < 0:
            return []
        return [f"-preset {rank + 1}"]  # 1-7

    def get_bitrate_options(self) -> list[str]:
        bitrates = get_bitrate_distribution(self.config)
        if bitrates.max > 0:
            return [
                f"-global_quality {self.config.crf}",
                f"-maxrate {format_bitrate(bitrates.max, bitrates.unit)}",
            ]
        # VAAPI does not default to constant quality, so ICQ is named explicitly
        return [f"-q {self.config.crf} -rc_mode icq"]

    def get_thread_options(self) -> list[str]:
        return []
