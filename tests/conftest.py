"""Shared test fixtures."""

import numpy as np
import pytest

from tests.helpers import block_image
from utils.image_utils import PixelBuffer


@pytest.fixture
def transparent_buffer():
    return PixelBuffer(width=20, height=10, data=bytes(20 * 10 * 4))


@pytest.fixture
def opaque_buffer():
    pixels = np.full((12, 12, 4), (40, 40, 40, 255), dtype=np.uint8)
    return PixelBuffer.from_array(pixels)


@pytest.fixture
def block_on_white():
    return block_image()


@pytest.fixture
def white_on_black():
    return block_image(background=(0, 0, 0, 255), fill=(255, 255, 255, 255))
