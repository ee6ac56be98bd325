"""Encoder preset ranking.

Software encoders take the preset name as-is. Hardware encoders have their
own numeric scales, so handlers translate the rank returned here.
"""

# Slowest / highest quality first
PRESET_RANKING: tuple[str, ...] = (
    "veryslow",
    "slower",
    "slow",
    "medium",
    "fast",
    "faster",
    "veryfast",
    "superfast",
    "ultrafast",
)


def get_preset_index(preset: str) -> int:
    """Get the rank of a preset name.

    Args:
        preset: x264-style preset name (e.g., "medium").

    Returns:
        0 (veryslow) through 8 (ultrafast), or -1 if unrecognized.
    """
    try:
        return PRESET_RANKING.index(preset)
    except ValueError:
        return -1
