"""CLI command for building transcode options.

Computes the FFmpeg options for a video stream from the effective
configuration (file, environment, then command-line overrides).
"""

import json
import logging
import sys

import click

from vto.cli.exit_codes import ExitCode
from vto.cli.output import error_exit, exit_code_for
from vto.config import ConfigError, ConfigSource, get_config
from vto.domain import (
    AudioCodec,
    TranscodeHWAccel,
    TranscodeOptions,
    VideoCodec,
    VideoStreamInfo,
)
from vto.transcode import TranscodeError, build_transcode_options, resolve_backend

logger = logging.getLogger(__name__)


def format_human(backend: str, options: TranscodeOptions) -> str:
    """Format transcode options for terminal output."""
    lines = [f"Backend: {backend}", "Input options:"]
    lines.extend(f"  {option}" for option in options.input_options)
    if not options.input_options:
        lines.append("  (none)")
    lines.append("Output options:")
    lines.extend(f"  {option}" for option in options.output_options)
    lines.append(f"Two-pass: {'yes' if options.two_pass else 'no'}")
    return "\n".join(lines)


@click.command("options")
@click.option(
    "--height",
    type=click.IntRange(min=1),
    required=True,
    help="Stream height in pixels.",
)
@click.option(
    "--width",
    type=click.IntRange(min=1),
    required=True,
    help="Stream width in pixels.",
)
@click.option(
    "--rotation",
    type=int,
    default=0,
    show_default=True,
    help="Stream rotation in degrees.",
)
@click.option(
    "--codec",
    type=click.Choice([c.value for c in VideoCodec]),
    default=None,
    help="Target video codec.",
)
@click.option(
    "--audio-codec",
    type=click.Choice([c.value for c in AudioCodec]),
    default=None,
    help="Target audio codec.",
)
@click.option(
    "--accel",
    type=click.Choice([a.value for a in TranscodeHWAccel]),
    default=None,
    help="Hardware acceleration.",
)
@click.option(
    "--preset",
    default=None,
    help="Encoder preset (veryslow ... ultrafast).",
)
@click.option(
    "--crf",
    type=click.IntRange(0, 51),
    default=None,
    help="Constant rate factor.",
)
@click.option(
    "--max-bitrate",
    default=None,
    help="Max bitrate, e.g. 2000k (empty = unconstrained).",
)
@click.option(
    "--two-pass/--no-two-pass",
    default=None,
    help="Enable two-pass encoding.",
)
@click.option(
    "--resolution",
    default=None,
    help="Target resolution: 'original' or short side in pixels.",
)
@click.option(
    "--threads",
    type=click.IntRange(min=0),
    default=None,
    help="Encoder threads (0 = auto).",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if the hardware backend does not support the target codec.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def options_command(
    ctx: click.Context,
    height: int,
    width: int,
    rotation: int,
    codec: str | None,
    audio_codec: str | None,
    accel: str | None,
    preset: str | None,
    crf: int | None,
    max_bitrate: str | None,
    two_pass: bool | None,
    resolution: str | None,
    threads: int | None,
    strict: bool,
    output_format: str,
) -> None:
    """Print the FFmpeg options for transcoding a video stream.

    Examples:

        # 1080p landscape video with the configured settings
        vto options --height 1080 --width 1920

        # NVENC HEVC at 720p with a 4 Mbit/s cap
        vto options --height 2160 --width 3840 --accel nvenc --codec hevc \\
            --max-bitrate 4M --resolution 720

        # Machine-readable output
        vto options --height 1080 --width 1920 --format json
    """
    json_output = output_format == "json"
    overrides = ConfigSource(
        target_video_codec=codec,
        target_audio_codec=audio_codec,
        accel=accel,
        preset=preset,
        crf=crf,
        max_bitrate=max_bitrate,
        two_pass=two_pass,
        target_resolution=resolution,
        threads=threads,
    )

    stream = VideoStreamInfo(height=height, width=width, rotation=rotation)

    try:
        config = get_config(ctx.obj.get("config_path"), overrides=overrides)
        backend = resolve_backend(config.ffmpeg).value
        logger.debug("Resolved backend %s for %dx%d", backend, width, height)
        options = build_transcode_options(config.ffmpeg, stream, strict=strict)
    except (ConfigError, TranscodeError) as e:
        error_exit(str(e), exit_code_for(e), json_output)
    except KeyboardInterrupt:
        logger.info("Interrupted while building options")
        sys.exit(ExitCode.INTERRUPTED)

    if json_output:
        click.echo(json.dumps({"backend": backend, **options.to_dict()}, indent=2))
    else:
        click.echo(format_human(backend, options))
