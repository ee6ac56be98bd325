"""CLI command for listing encoder backends."""

import json

import click

from vto.domain import EncoderBackend
from vto.transcode import supported_codecs


@click.command("backends")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
def backends_command(json_output: bool) -> None:
    """List encoder backends and the codecs they support.

    Software backends encode a single codec. Hardware backends are
    selected with --accel (or "accel" in the config file) and encode the
    configured target codec.
    """
    backends = [
        {
            "name": backend.value,
            "type": "hardware" if backend.is_hardware else "software",
            "codecs": [codec.value for codec in supported_codecs(backend)],
        }
        for backend in EncoderBackend
    ]

    if json_output:
        click.echo(json.dumps({"backends": backends}, indent=2))
        return

    for entry in backends:
        click.echo(
            f"{entry['name']:<8} {entry['type']:<9} {', '.join(entry['codecs'])}"
        )
