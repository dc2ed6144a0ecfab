"""
Utility Functions
"""

from .color_utils import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    shift_hue,
    darken_color,
    lighten_color,
    is_light_color,
)
from .image_utils import PixelBuffer, chamfer_distance_transform
from .exceptions import LoadError, AccessError

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "shift_hue",
    "darken_color",
    "lighten_color",
    "is_light_color",
    "PixelBuffer",
    "chamfer_distance_transform",
    "LoadError",
    "AccessError",
]
