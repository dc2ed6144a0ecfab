"""Image helpers shared by the test modules."""

import base64
import io

import numpy as np
from PIL import Image


def to_data_uri(image: Image.Image) -> str:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


def from_data_uri(uri: str) -> Image.Image:
    header, _, payload = uri.partition(",")
    assert header == "data:image/png;base64"
    return Image.open(io.BytesIO(base64.b64decode(payload))).convert("RGBA")


def block_image(size=(80, 80), box=(30, 30, 50, 50), background=(255, 255, 255, 255), fill=(0, 0, 0, 255)):
    """Solid rectangle (left, top, right, bottom exclusive) on a solid background."""
    pixels = np.zeros((size[1], size[0], 4), dtype=np.uint8)
    pixels[:, :] = background
    left, top, right, bottom = box
    pixels[top:bottom, left:right] = fill
    return Image.fromarray(pixels, "RGBA")
