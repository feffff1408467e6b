"""
Intensity scaling and color mixing for heatmap cells.

Values are normalized against the minimum and maximum of the whole data set
and mapped onto a base color that fades toward white for low intensities.
"""

import math
import re
from typing import Optional

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value) -> bool:
    """Return True if value is a 3- or 6-digit hex color string."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp01(value: float) -> float:
    """Clamp a number into the [0, 1] interval."""
    return max(0.0, min(1.0, value))


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex color into an (r, g, b) tuple.

    Args:
        hex_color: Color in "#rgb" or "#rrggbb" form (leading "#" optional)

    Returns:
        Tuple of channel values 0-255

    Raises:
        ValueError: If the string is not a 3- or 6-digit hex color
    """
    match = HEX_COLOR_PATTERN.match(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    digits = match.group(1)
    if len(digits) == 3:
        # "#abc" is shorthand for "#aabbcc"
        digits = "".join(ch + ch for ch in digits)

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    """Format an (r, g, b) tuple as a lowercase "#rrggbb" string."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def normalize_hex(hex_color: str) -> str:
    """Return the lowercase 6-digit form of a hex color."""
    return rgb_to_hex(hex_to_rgb(hex_color))


def mix_to_white(base_color: str, intensity: float) -> str:
    """
    Blend a base color toward white.

    Each channel is interpolated as base + (255 - base) * (1 - intensity),
    so intensity 0 gives pure white and intensity 1 gives the base color.

    Args:
        base_color: Hex color for full intensity
        intensity: Position on the scale, clamped to [0, 1]

    Returns:
        The mixed color as "#rrggbb"
    """
    t = clamp01(intensity)
    mixed = tuple(
        _round_half_up(channel + (255 - channel) * (1 - t))
        for channel in hex_to_rgb(base_color)
    )
    return rgb_to_hex(mixed)


class IntensityScale:
    """Maps a value to its position between the observed minimum and maximum."""

    def __init__(self, minimum: float, maximum: float, empty: bool = False):
        self.minimum = minimum
        self.maximum = maximum
        # No finite values were seen; every lookup renders as empty
        self.empty = empty

    @property
    def thresholds(self) -> tuple[float, float]:
        return (self.minimum, self.maximum)

    def __call__(self, value: Optional[float]) -> float:
        if value is None or self.empty:
            return 0.0

        span = self.maximum - self.minimum
        if span == 0:
            # A single distinct value renders fully saturated
            return 1.0

        return clamp01((value - self.minimum) / span)

    def __repr__(self) -> str:
        return f"IntensityScale(minimum={self.minimum!r}, maximum={self.maximum!r})"


def build_scale(values: list[float]) -> IntensityScale:
    """
    Build an intensity scale over a set of values.

    Non-finite entries are ignored. With no finite values the scale collapses
    to min = max = 0.

    Args:
        values: Values drawn from the whole data set, not just one month

    Returns:
        IntensityScale closed over the min/max of the finite values
    """
    finite = [
        v for v in values
        if isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
    ]

    if not finite:
        return IntensityScale(0.0, 0.0, empty=True)

    return IntensityScale(min(finite), max(finite))
