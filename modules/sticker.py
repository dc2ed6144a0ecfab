"""
Sticker Compositor - Cut a logo out with a white die-cut border
"""

from typing import Optional, Tuple

import numpy as np
from loguru import logger
from PIL import Image

from config import settings
from modules.sampler import ImageSampler
from utils.exceptions import LoadError
from utils.image_utils import (
    canvas_rgba,
    chamfer_distance_transform,
    encode_data_uri,
    fit_within,
    luminance_map,
)


class StickerCompositor:
    """
    Builds sticker-style cutouts

    Detects whether the mask source is dark-on-light or light-on-dark from
    its corners, thresholds luminance into a content mask, grows a white
    border around it with a chamfer distance transform, and layers the
    content on top. Holds configuration only; every call is independent.
    """

    def __init__(
        self,
        border_size: int = None,
        max_size: int = None,
        orthogonal_weight: float = None,
        diagonal_weight: float = None,
        corner_inset: int = None,
        luminance_threshold: float = None,
        sampler: ImageSampler = None
    ):
        """
        Initialize Sticker Compositor

        Args:
            border_size: White border thickness in pixels
            max_size: Longer-edge cap for the processing raster
            orthogonal_weight: Chamfer cost of a 4-neighbour step
            diagonal_weight: Chamfer cost of a diagonal step
            corner_inset: Inset of the corner samples used for background detection
            luminance_threshold: Content / background luminance split
            sampler: ImageSampler used to load images
        """
        self.border_size = settings.STICKER_BORDER_SIZE if border_size is None else border_size
        self.max_size = max_size or settings.STICKER_MAX_SIZE
        self.orthogonal_weight = orthogonal_weight or settings.CHAMFER_ORTHOGONAL_WEIGHT
        self.diagonal_weight = diagonal_weight or settings.CHAMFER_DIAGONAL_WEIGHT
        self.corner_inset = settings.STICKER_CORNER_INSET if corner_inset is None else corner_inset
        self.luminance_threshold = luminance_threshold or settings.STICKER_LUMINANCE_THRESHOLD
        self.sampler = sampler or ImageSampler()

        logger.info(
            f"StickerCompositor initialized (border={self.border_size}px, "
            f"max_size={self.max_size}px, chamfer={self.orthogonal_weight}/{self.diagonal_weight})"
        )

    async def create_sticker_effect(self, image_url: str, mask_source_url: Optional[str] = None) -> str:
        """
        Create a sticker cutout of an image

        Args:
            image_url: Image whose pixels are shown
            mask_source_url: Optional black & white version that defines the shape

        Returns:
            PNG data URI of the sticker, or image_url unchanged if anything fails
        """
        try:
            target = await self.sampler.load_image(image_url)

            mask_source = target
            self_masked = not mask_source_url or mask_source_url == image_url
            if not self_masked:
                try:
                    mask_source = await self.sampler.load_image(mask_source_url)
                except LoadError as e:
                    logger.warning(f"Failed to load mask source, falling back to target image: {e}")

            sticker = self.compose(target, mask_source, self_masked=self_masked)
            return encode_data_uri(sticker)

        except Exception as e:
            logger.error(f"Error creating sticker effect: {e}")
            return image_url

    def compose(self, target: Image.Image, mask_source: Image.Image, self_masked: bool = True) -> Image.Image:
        """
        Composite the sticker from decoded images

        Args:
            target: Image whose pixels are shown
            mask_source: Image that defines the content shape
            self_masked: True when the mask came from the target itself;
                dark-background content is then inverted so it stays visible
                on the white border

        Returns:
            RGBA sticker image at the processing size
        """
        size = fit_within(target.size, self.max_size)
        width, height = size

        mask_pixels = canvas_rgba(mask_source, size)
        mask_luminance = luminance_map(mask_pixels)

        light_background = self.is_light_background(mask_luminance)
        content = self.content_mask(mask_luminance, light_background)

        border = self.border_layer(content)

        logo_pixels = canvas_rgba(target, size)
        logo_pixels[~content, 3] = 0

        # TODO: confirm with design whether a distinct mask source on a dark background should also invert
        if self_masked and not light_background:
            logo_pixels[content, :3] = 255 - logo_pixels[content, :3]

        canvas = Image.fromarray(border, "RGBA")
        canvas = Image.alpha_composite(canvas, Image.fromarray(logo_pixels, "RGBA"))

        logger.debug(
            f"Sticker composed {width}x{height}: "
            f"{'light' if light_background else 'dark'} background, "
            f"{int(content.sum())} content pixels"
        )

        return canvas

    def is_light_background(self, luminance: np.ndarray) -> bool:
        """
        Classify the background from four inset corner samples
        """
        height, width = luminance.shape
        total = 0.0
        for x, y in self._corner_points(width, height):
            total += float(luminance[y, x])
        return total / 4 > self.luminance_threshold

    def content_mask(self, luminance: np.ndarray, light_background: bool) -> np.ndarray:
        """
        Binary content mask: dark pixels on light backgrounds, light pixels on dark ones
        """
        if light_background:
            return luminance < self.luminance_threshold
        return luminance >= self.luminance_threshold

    def border_layer(self, content: np.ndarray) -> np.ndarray:
        """
        White border within border_size pixels of content, with a 1px anti-aliased rim

        Returns:
            (height, width, 4) uint8 RGBA array
        """
        dist = chamfer_distance_transform(content, self.orthogonal_weight, self.diagonal_weight)
        actual = dist / float(self.orthogonal_weight)

        alpha = np.zeros(content.shape, dtype=np.float64)
        alpha[actual <= self.border_size] = 255.0

        rim = (actual > self.border_size) & (actual < self.border_size + 1)
        alpha[rim] = np.clip((self.border_size + 1 - actual[rim]) * 255.0, 0, 255)

        layer = np.zeros(content.shape + (4,), dtype=np.uint8)
        covered = alpha > 0
        layer[covered, :3] = 255
        layer[:, :, 3] = np.floor(alpha).astype(np.uint8)
        return layer

    def _corner_points(self, width: int, height: int) -> Tuple[Tuple[int, int], ...]:
        inset = self.corner_inset
        corners = (
            (inset, inset),
            (width - 1 - inset, inset),
            (inset, height - 1 - inset),
            (width - 1 - inset, height - 1 - inset),
        )
        return tuple(
            (max(0, min(width - 1, x)), max(0, min(height - 1, y)))
            for x, y in corners
        )


async def create_sticker_effect(image_url: str, mask_source_url: Optional[str] = None) -> str:
    """Create a sticker cutout with the configured border and raster cap"""
    return await StickerCompositor().create_sticker_effect(image_url, mask_source_url)
