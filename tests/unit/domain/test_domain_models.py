"""Tests for domain models and enums."""

from dataclasses import FrozenInstanceError

import pytest

from vto.domain import (
    EncoderBackend,
    FFmpegConfig,
    TranscodeHWAccel,
    TranscodeOptions,
    VideoCodec,
    VideoStreamInfo,
)


class TestFFmpegConfig:
    """Tests for FFmpegConfig defaults and immutability."""

    def test_defaults(self) -> None:
        config = FFmpegConfig()
        assert config.target_video_codec == VideoCodec.H264
        assert config.preset == "ultrafast"
        assert config.crf == 23
        assert config.max_bitrate == ""
        assert config.two_pass is False
        assert config.target_resolution == "720"
        assert config.threads == 0
        assert config.accel == TranscodeHWAccel.DISABLED

    def test_is_frozen(self) -> None:
        config = FFmpegConfig()
        with pytest.raises(FrozenInstanceError):
            config.crf = 30  # type: ignore[misc]


class TestVideoStreamInfo:
    """Tests for VideoStreamInfo."""

    def test_rotation_defaults_to_zero(self) -> None:
        assert VideoStreamInfo(height=1080, width=1920).rotation == 0


class TestTranscodeOptions:
    """Tests for TranscodeOptions."""

    def test_defaults_are_empty(self) -> None:
        options = TranscodeOptions()
        assert options.input_options == ()
        assert options.output_options == ()
        assert options.two_pass is False

    def test_to_dict(self) -> None:
        options = TranscodeOptions(
            input_options=("-hwaccel qsv",),
            output_options=("-vcodec h264_qsv",),
            two_pass=True,
        )
        assert options.to_dict() == {
            "input_options": ["-hwaccel qsv"],
            "output_options": ["-vcodec h264_qsv"],
            "two_pass": True,
        }

    def test_to_dict_returns_fresh_lists(self) -> None:
        options = TranscodeOptions(output_options=("-crf 23",))
        options.to_dict()["output_options"].append("-preset fast")
        assert options.output_options == ("-crf 23",)

    def test_option_sequences_cannot_be_mutated(self) -> None:
        """Frozen options carry tuples, so no caller can append to them."""
        options = TranscodeOptions(output_options=("-crf 23",))
        with pytest.raises(AttributeError):
            options.output_options.append("-preset fast")  # type: ignore[attr-defined]


class TestEncoderBackend:
    """Tests for EncoderBackend enum."""

    @pytest.mark.parametrize(
        "backend", [EncoderBackend.NVENC, EncoderBackend.QSV, EncoderBackend.VAAPI]
    )
    def test_hardware_backends(self, backend: EncoderBackend) -> None:
        assert backend.is_hardware

    @pytest.mark.parametrize(
        "backend", [EncoderBackend.H264, EncoderBackend.HEVC, EncoderBackend.VP9]
    )
    def test_software_backends(self, backend: EncoderBackend) -> None:
        assert not backend.is_hardware

    def test_values_match_codecs_and_accel(self) -> None:
        """Software backends share codec names, hardware ones accel names."""
        assert {c.value for c in VideoCodec} | {
            a.value for a in TranscodeHWAccel if a != TranscodeHWAccel.DISABLED
        } == {b.value for b in EncoderBackend}
