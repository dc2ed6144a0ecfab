"""
Image utility functions for pixel buffers and raster processing
"""

import base64
import io
from dataclasses import dataclass
from typing import Tuple

import cv2
import numpy as np
from PIL import Image


@dataclass(frozen=True)
class PixelBuffer:
    """
    Decoded RGBA raster

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Row-major RGBA bytes (width * height * 4)
    """
    width: int
    height: int
    data: bytes

    def __post_init__(self):
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"PixelBuffer data has {len(self.data)} bytes, expected {expected}"
            )

    @property
    def total_pixels(self) -> int:
        return self.width * self.height

    def as_array(self) -> np.ndarray:
        """Read-only (height, width, 4) uint8 view of the pixel data"""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.data)

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        rgba = image.convert("RGBA")
        return cls(width=rgba.width, height=rgba.height, data=rgba.tobytes())

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        array = np.ascontiguousarray(array, dtype=np.uint8)
        height, width = array.shape[:2]
        return cls(width=width, height=height, data=array.tobytes())


def decode_image_bytes(image_bytes: bytes) -> Image.Image:
    """
    Decode encoded image bytes (PNG, JPEG, WebP...) into an RGBA image

    Raises:
        PIL.UnidentifiedImageError / OSError if the bytes are not a decodable image
    """
    img = Image.open(io.BytesIO(image_bytes))
    img.load()
    return img.convert("RGBA")


def fit_within(size: Tuple[int, int], max_size: int) -> Tuple[int, int]:
    """
    Scale (width, height) down so neither side exceeds max_size

    Keeps the aspect ratio and never upscales.

    Returns:
        (width, height) floored to whole pixels, at least 1x1
    """
    w, h = size
    scale = 1.0
    if w > max_size or h > max_size:
        scale = min(max_size / w, max_size / h)

    return max(1, int(w * scale)), max(1, int(h * scale))


def canvas_rgba(image: Image.Image, size: Tuple[int, int]) -> np.ndarray:
    """
    Draw an image at the given size and read back its RGBA pixels

    Fully transparent pixels read back as transparent black, the way a
    browser canvas reports them.

    Returns:
        (height, width, 4) uint8 array
    """
    pixels = np.array(image.convert("RGBA"), dtype=np.uint8)
    if (pixels.shape[1], pixels.shape[0]) != tuple(size):
        pixels = resize_pixels(pixels, size)

    pixels[pixels[:, :, 3] == 0, :3] = 0
    return pixels


def resize_pixels(pixels: np.ndarray, size: Tuple[int, int]) -> np.ndarray:
    """
    Resize an RGBA array to size (width, height)

    Area averaging when shrinking, Lanczos when enlarging.
    """
    h, w = pixels.shape[:2]
    target_w, target_h = size
    if target_w <= w and target_h <= h:
        interpolation = cv2.INTER_AREA
    else:
        interpolation = cv2.INTER_LANCZOS4

    return cv2.resize(pixels, (target_w, target_h), interpolation=interpolation)


def luminance_map(pixels: np.ndarray) -> np.ndarray:
    """
    Per-pixel perceived brightness (0-255) of an RGB(A) array
    """
    rgb = pixels[:, :, :3].astype(np.float64)
    return 0.299 * rgb[:, :, 0] + 0.587 * rgb[:, :, 1] + 0.114 * rgb[:, :, 2]


def chamfer_distance_transform(
    seeds: np.ndarray,
    orthogonal_weight: float = 3,
    diagonal_weight: float = 4
) -> np.ndarray:
    """
    Two-pass chamfer distance transform

    Every pixel gets the weighted distance to the nearest seed pixel, using
    orthogonal_weight for 4-neighbour steps and diagonal_weight for diagonal
    steps. The forward pass runs top-left to bottom-right, the backward pass
    bottom-right to top-left, each keeping min(current, neighbour + weight).

    Within a row the left-to-right recurrence d[x] = min(d[x], d[x-1] + w)
    is evaluated as w*x + cummin(d[k] - w*k), which gives the same result as
    the pixel-by-pixel loop.

    Args:
        seeds: (height, width) boolean array, True where distance is 0
        orthogonal_weight: Cost of a horizontal or vertical step
        diagonal_weight: Cost of a diagonal step

    Returns:
        (height, width) float64 array of chamfer distances
    """
    height, width = seeds.shape
    sentinel = float((width + height) * 4 * max(orthogonal_weight, diagonal_weight))
    dist = np.where(seeds, 0.0, sentinel)

    if height == 0 or width == 0:
        return dist

    ramp = np.arange(width, dtype=np.float64) * orthogonal_weight

    # Forward pass
    for y in range(height):
        row = dist[y]
        if y > 0:
            prev = dist[y - 1]
            row = np.minimum(row, prev + orthogonal_weight)
            row[1:] = np.minimum(row[1:], prev[:-1] + diagonal_weight)
            row[:-1] = np.minimum(row[:-1], prev[1:] + diagonal_weight)
        dist[y] = np.minimum.accumulate(row - ramp) + ramp

    # Backward pass
    for y in range(height - 1, -1, -1):
        row = dist[y]
        if y < height - 1:
            nxt = dist[y + 1]
            row = np.minimum(row, nxt + orthogonal_weight)
            row[:-1] = np.minimum(row[:-1], nxt[1:] + diagonal_weight)
            row[1:] = np.minimum(row[1:], nxt[:-1] + diagonal_weight)
        flipped = row[::-1]
        dist[y] = (np.minimum.accumulate(flipped - ramp) + ramp)[::-1]

    return dist


def encode_data_uri(image: Image.Image, format: str = "PNG") -> str:
    """
    Encode an image as a base64 data URI
    """
    buffer = io.BytesIO()
    image.save(buffer, format=format)
    mime = Image.MIME.get(format.upper(), "image/png")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:{mime};base64,{encoded}"
