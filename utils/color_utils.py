"""
Color conversion utilities for hex, RGB and HSL transformations
"""

import colorsys
import re
from typing import List, Optional, Tuple

_HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


def luminance(r: float, g: float, b: float) -> float:
    """
    Perceived brightness of an RGB color

    Returns:
        Luminance in the 0-255 range
    """
    return 0.299 * r + 0.587 * g + 0.114 * b


def hex_to_rgb(hex_color: str) -> Optional[Tuple[int, int, int]]:
    """
    Convert a 6-digit hex string (with or without '#') to an RGB tuple

    Returns:
        (r, g, b) or None if the string is not a 6-digit hex color
    """
    if not isinstance(hex_color, str):
        return None

    match = _HEX_PATTERN.match(hex_color)
    if not match:
        return None

    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to a lowercase '#rrggbb' string"""
    return "#{:02x}{:02x}{:02x}".format(int(r), int(g), int(b))


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert RGB (0-255) to HSL (each component 0-1)
    """
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return h, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """
    Convert HSL (each component 0-1) to RGB rounded to integers 0-255
    """
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (
        _round_channel(r * 255),
        _round_channel(g * 255),
        _round_channel(b * 255),
    )


def shift_hue(hex_color: str, degrees: float) -> str:
    """
    Rotate the hue of a hex color

    Args:
        hex_color: Color to shift
        degrees: Rotation in degrees, negative values wrap around

    Returns:
        Shifted color, or the input unchanged if it is not a valid hex color
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color

    h, s, l = rgb_to_hsl(*rgb)
    new_hue = (h + degrees / 360.0) % 1.0

    return rgb_to_hex(*hsl_to_rgb(new_hue, s, l))


def shift_palette(colors: List[str], degrees: float) -> List[str]:
    """Shift the hue of every color in a palette by the same amount"""
    return [shift_hue(color, degrees) for color in colors]


def darken_color(hex_color: str, amount: float = 0.2) -> str:
    """
    Darken a hex color by reducing its HSL lightness

    Args:
        hex_color: Color to darken
        amount: Lightness reduction (0-1)
    """
    return _adjust_lightness(hex_color, -amount)


def lighten_color(hex_color: str, amount: float = 0.2) -> str:
    """
    Lighten a hex color by increasing its HSL lightness

    Args:
        hex_color: Color to lighten
        amount: Lightness increase (0-1)
    """
    return _adjust_lightness(hex_color, amount)


def is_light_color(hex_color: str) -> bool:
    """
    Classify a color as light or dark

    The threshold is high (0.75) so only very bright colors count as light;
    everything else gets the dark treatment (white logo). Unparseable input
    is treated as light.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return True

    return luminance(*rgb) / 255.0 > 0.75


def _adjust_lightness(hex_color: str, delta: float) -> str:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color

    h, s, l = rgb_to_hsl(*rgb)
    new_l = max(0.0, min(1.0, l + delta))

    return rgb_to_hex(*hsl_to_rgb(h, s, new_l))


def _round_channel(value: float) -> int:
    # half-up rounding, Python's round() would send 127.5 to 128 but 126.5 to 126
    return max(0, min(255, int(value + 0.5)))
