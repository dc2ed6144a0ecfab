"""
Content Cropper - Trim uniform margins around a logo
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from loguru import logger
from PIL import Image

from config import settings
from modules.sampler import ImageSampler
from utils.image_utils import encode_data_uri


@dataclass
class CropDetails:
    """Explicit crop rectangle in source pixels"""
    x: int
    y: int
    width: int
    height: int


class ContentCropper:
    """
    Crops an image to the region that differs from its background

    The top-left pixel is taken as the background color.
    """

    def __init__(self, threshold: int = None, padding: int = None, sampler: ImageSampler = None):
        """
        Initialize Content Cropper

        Args:
            threshold: Manhattan RGBA distance from the background that counts as content
            padding: Margin kept around the detected content
            sampler: ImageSampler used to load images
        """
        self.threshold = settings.CROP_DIFF_THRESHOLD if threshold is None else threshold
        self.padding = settings.CROP_PADDING if padding is None else padding
        self.sampler = sampler or ImageSampler()

        logger.info(f"ContentCropper initialized (threshold={self.threshold}, padding={self.padding}px)")

    async def crop_image_to_content(self, image_url: str, crop: Optional[CropDetails] = None) -> str:
        """
        Crop an image to its content

        Args:
            image_url: Image locator
            crop: Explicit rectangle; detected from the pixels when omitted

        Returns:
            PNG data URI of the cropped image, or image_url unchanged when there
            is nothing to crop or the image cannot be processed
        """
        try:
            image = await self.sampler.load_image(image_url)
            cropped = self.crop(image, crop)
            if cropped is None:
                return image_url
            return encode_data_uri(cropped)

        except Exception as e:
            logger.error(f"Error cropping image to content: {e}")
            return image_url

    def crop(self, image: Image.Image, crop: Optional[CropDetails] = None) -> Optional[Image.Image]:
        """
        Crop a decoded image

        Returns:
            Cropped image, or None when no content was found or the crop
            would keep (nearly) the whole image
        """
        if crop is not None:
            box = (crop.x, crop.y, crop.x + crop.width, crop.y + crop.height)
        else:
            box = self.content_box(np.array(image.convert("RGBA")))
            if box is None:
                logger.debug("No content found to crop (uniform color)")
                return None

        left, top, right, bottom = box
        if right - left >= image.width - 2 and bottom - top >= image.height - 2:
            logger.debug("Crop is entire image, keeping original")
            return None

        logger.info(f"Cropping image {image.width}x{image.height} to {box}")
        return image.crop(box)

    def content_box(self, pixels: np.ndarray) -> Optional[Tuple[int, int, int, int]]:
        """
        Padded bounding box of pixels that differ from the top-left pixel

        Returns:
            (left, top, right, bottom) or None if the image is uniform
        """
        height, width = pixels.shape[:2]
        values = pixels.astype(np.int32)
        background = values[0, 0]

        diff = np.abs(values - background).sum(axis=2)
        content = diff > self.threshold
        if background[3] == 0:
            content &= values[:, :, 3] != 0

        if not content.any():
            return None

        rows = np.flatnonzero(content.any(axis=1))
        cols = np.flatnonzero(content.any(axis=0))

        left = max(0, int(cols[0]) - self.padding)
        top = max(0, int(rows[0]) - self.padding)
        right = min(width, int(cols[-1]) + self.padding)
        bottom = min(height, int(rows[-1]) + self.padding)

        return left, top, right, bottom


async def crop_image_to_content(image_url: str, crop: Optional[CropDetails] = None) -> str:
    """Crop an image to its content with the configured threshold and padding"""
    return await ContentCropper().crop_image_to_content(image_url, crop)
