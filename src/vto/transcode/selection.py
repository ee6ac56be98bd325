"""Encoder backend selection.

Maps the configured acceleration mode and target codec to one encoder
backend, instantiates its handler and assembles the options.

Functions in this module:
- resolve_backend: Pick the backend tag for a configuration
- get_handler: Instantiate the handler for a configuration
- build_transcode_options: Select a handler and assemble options in one step
- supported_codecs: Capability list of a backend
"""

from __future__ import annotations

import logging

from vto.domain import (
    EncoderBackend,
    FFmpegConfig,
    TranscodeHWAccel,
    TranscodeOptions,
    VideoCodec,
    VideoStreamInfo,
)
from vto.transcode.exceptions import UnsupportedCodecError
from vto.transcode.handlers import (
    H264Handler,
    HEVCHandler,
    NVENCHandler,
    QSVHandler,
    VAAPIHandler,
    VP9Handler,
    VideoCodecHandler,
)

logger = logging.getLogger(__name__)

HANDLERS: dict[EncoderBackend, type[VideoCodecHandler]] = {
    EncoderBackend.H264: H264Handler,
    EncoderBackend.HEVC: HEVCHandler,
    EncoderBackend.VP9: VP9Handler,
    EncoderBackend.NVENC: NVENCHandler,
    EncoderBackend.QSV: QSVHandler,
    EncoderBackend.VAAPI: VAAPIHandler,
}

_SOFTWARE_BACKENDS: dict[VideoCodec, EncoderBackend] = {
    VideoCodec.H264: EncoderBackend.H264,
    VideoCodec.HEVC: EncoderBackend.HEVC,
    VideoCodec.VP9: EncoderBackend.VP9,
}

_HARDWARE_BACKENDS: dict[TranscodeHWAccel, EncoderBackend] = {
    TranscodeHWAccel.NVENC: EncoderBackend.NVENC,
    TranscodeHWAccel.QSV: EncoderBackend.QSV,
    TranscodeHWAccel.VAAPI: EncoderBackend.VAAPI,
}


def resolve_backend(config: FFmpegConfig) -> EncoderBackend:
    """Pick the encoder backend for a configuration.

    Args:
        config: FFmpeg configuration.

    Returns:
        The software backend for the target codec when acceleration is
        disabled, otherwise the hardware backend for the accel mode.
    """
    if config.accel == TranscodeHWAccel.DISABLED:
        return _SOFTWARE_BACKENDS[config.target_video_codec]
    return _HARDWARE_BACKENDS[config.accel]


def supported_codecs(backend: EncoderBackend) -> tuple[VideoCodec, ...]:
    """Get the codecs a backend can encode."""
    return HANDLERS[backend].supported_codecs


def get_handler(
    config: FFmpegConfig, *, strict: bool = False
) -> VideoCodecHandler:
    """Instantiate the option handler for a configuration.

    Codec support is informational: an unsupported backend/codec pair is
    logged and the handler is returned anyway, unless strict is set.

    Args:
        config: FFmpeg configuration.
        strict: Raise instead of warning on an unsupported codec.

    Returns:
        Handler for the resolved backend.

    Raises:
        UnsupportedCodecError: If strict and the backend cannot encode the
            target codec.
    """
    backend = resolve_backend(config)
    handler = HANDLERS[backend](config)

    if not handler.supports(config.target_video_codec):
        supported = tuple(c.value for c in handler.supported_codecs)
        if strict:
            raise UnsupportedCodecError(
                backend.value, config.target_video_codec.value, supported
            )
        logger.warning(
            "%s does not list %s as supported (supported: %s), building options anyway",
            backend.value,
            config.target_video_codec.value,
            ", ".join(supported),
        )

    logger.debug("Selected %s handler", backend.value)
    return handler


def build_transcode_options(
    config: FFmpegConfig,
    stream: VideoStreamInfo,
    *,
    strict: bool = False,
) -> TranscodeOptions:
    """Select the handler for a configuration and assemble its options.

    Args:
        config: FFmpeg configuration.
        stream: Probed video stream.
        strict: Raise on an unsupported backend/codec pair.

    Returns:
        TranscodeOptions for the stream.

    Raises:
        UnsupportedCodecError: If strict and the codec is unsupported.
        InvalidConfigurationError: If target_resolution is not numeric.
    """
    return get_handler(config, strict=strict).get_options(stream)
