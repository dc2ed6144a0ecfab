"""Tests for the sticker compositor."""

import asyncio

import numpy as np
import pytest
from PIL import Image

from modules.sticker import StickerCompositor, create_sticker_effect
from tests.helpers import block_image, from_data_uri, to_data_uri

BLOCK = (30, 30, 50, 50)


def border_pixel_count(image, box=BLOCK):
    """Opaque white pixels outside the content block."""
    pixels = np.array(image)
    white = (pixels[:, :, :3] == 255).all(axis=2) & (pixels[:, :, 3] == 255)
    left, top, right, bottom = box
    white[top:bottom, left:right] = False
    return int(white.sum())


def run_sticker(compositor, image_url, mask_url=None):
    return asyncio.run(compositor.create_sticker_effect(image_url, mask_url))


class TestFailures:
    def test_undecodable_returns_original(self):
        url = "data:image/png;base64,bm90IGFuIGltYWdl"
        assert asyncio.run(create_sticker_effect(url)) == url

    def test_missing_file_returns_original(self, tmp_path):
        url = str(tmp_path / "nope.png")
        assert asyncio.run(create_sticker_effect(url)) == url

    def test_bad_mask_falls_back_to_target(self, block_on_white):
        url = to_data_uri(block_on_white)
        result = run_sticker(StickerCompositor(border_size=5), url, "data:image/png;base64,AAAA")
        assert result.startswith("data:image/png;base64,")
        assert border_pixel_count(from_data_uri(result)) > 0


class TestBorder:
    def test_light_background_cutout(self, block_on_white):
        image = from_data_uri(run_sticker(StickerCompositor(border_size=5), to_data_uri(block_on_white)))
        assert image.size == (80, 80)
        # content kept, corners transparent, border around the block
        assert image.getpixel((40, 40)) == (0, 0, 0, 255)
        assert image.getpixel((0, 0))[3] == 0
        assert image.getpixel((27, 40)) == (255, 255, 255, 255)
        assert image.getpixel((20, 40))[3] == 0

    def test_border_grows_with_thickness(self, block_on_white):
        url = to_data_uri(block_on_white)
        thin = border_pixel_count(from_data_uri(run_sticker(StickerCompositor(border_size=4), url)))
        thick = border_pixel_count(from_data_uri(run_sticker(StickerCompositor(border_size=10), url)))
        assert 0 < thin < thick

    def test_border_independent_of_content_detail(self):
        plain = block_image(box=BLOCK)
        detailed = np.array(block_image(box=BLOCK, fill=(40, 40, 40, 255)))
        detailed[30:50:2, 30:50:3, :3] = (90, 10, 60)
        compositor = StickerCompositor(border_size=6)

        plain_count = border_pixel_count(from_data_uri(run_sticker(compositor, to_data_uri(plain))))
        detailed_count = border_pixel_count(
            from_data_uri(run_sticker(compositor, to_data_uri(Image.fromarray(detailed, "RGBA"))))
        )
        assert plain_count == detailed_count

    def test_anti_aliased_rim(self, block_on_white):
        compositor = StickerCompositor(border_size=5)
        border = compositor.border_layer(np.array(block_on_white)[:, :, 0] < 128)
        alphas = set(np.unique(border[:, :, 3]).tolist())
        assert {0, 255} <= alphas
        assert any(0 < a < 255 for a in alphas)

    def test_raster_capped(self):
        image = block_image(size=(200, 100), box=(80, 30, 120, 70))
        result = from_data_uri(run_sticker(StickerCompositor(max_size=50, border_size=2), to_data_uri(image)))
        assert result.size == (50, 25)


class TestInversion:
    def test_self_masked_dark_background_inverts(self, white_on_black):
        result = from_data_uri(run_sticker(StickerCompositor(border_size=5), to_data_uri(white_on_black)))
        assert result.getpixel((40, 40)) == (0, 0, 0, 255)
        assert result.getpixel((27, 40)) == (255, 255, 255, 255)

    def test_same_url_counts_as_self_masked(self, white_on_black):
        url = to_data_uri(white_on_black)
        result = from_data_uri(run_sticker(StickerCompositor(border_size=5), url, url))
        assert result.getpixel((40, 40)) == (0, 0, 0, 255)

    def test_distinct_mask_does_not_invert(self, white_on_black):
        colored = block_image(background=(10, 10, 10, 255), fill=(200, 40, 40, 255))
        result = from_data_uri(
            run_sticker(StickerCompositor(border_size=5), to_data_uri(colored), to_data_uri(white_on_black))
        )
        assert result.getpixel((40, 40)) == (200, 40, 40, 255)


class TestClassification:
    def test_corner_detection(self):
        compositor = StickerCompositor()
        assert compositor.is_light_background(np.full((20, 20), 200.0))
        assert not compositor.is_light_background(np.full((20, 20), 128.0))

    def test_tiny_raster_corners_clamped(self):
        assert StickerCompositor().is_light_background(np.full((3, 3), 255.0))

    def test_content_mask(self):
        luminance = np.array([[0.0, 127.0, 128.0, 255.0]])
        compositor = StickerCompositor()
        assert compositor.content_mask(luminance, True).tolist() == [[True, True, False, False]]
        assert compositor.content_mask(luminance, False).tolist() == [[False, False, True, True]]
