"""
Image Sampler - Load image resources (URLs, data URIs, paths) into pixel buffers
"""

import asyncio
import base64
import binascii
from pathlib import Path
from typing import Optional
from urllib.parse import unquote_to_bytes, urlparse

import httpx
from loguru import logger
from PIL import Image, UnidentifiedImageError

from config import settings
from utils.exceptions import AccessError, LoadError
from utils.image_utils import PixelBuffer, decode_image_bytes


class ImageSampler:
    """
    Fetches and decodes image resources

    Supports data URIs (base64 or percent-encoded), http(s) URLs,
    file:// URLs and plain filesystem paths.
    """

    def __init__(self, timeout: float = None, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize Image Sampler

        Args:
            timeout: HTTP timeout in seconds (default: settings.IMAGE_FETCH_TIMEOUT)
            client: Optional shared AsyncClient; a short-lived one is used otherwise
        """
        self.timeout = timeout or settings.IMAGE_FETCH_TIMEOUT
        self.client = client

    async def load_image(self, url: str) -> Image.Image:
        """
        Load and decode an image resource

        Args:
            url: Image locator

        Returns:
            Decoded RGBA PIL image

        Raises:
            AccessError: Access to the resource was refused
            LoadError: The resource could not be fetched or decoded
        """
        if not url:
            raise LoadError(url, "empty image reference")

        raw = await self._read_bytes(url)

        try:
            image = decode_image_bytes(raw)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise LoadError(url, f"decode failed: {e}") from e

        logger.debug(f"Loaded image {image.width}x{image.height}")
        return image

    async def load_pixel_buffer(self, url: str) -> PixelBuffer:
        """
        Load an image resource into an immutable RGBA pixel buffer

        Raises:
            AccessError: Access to the resource was refused
            LoadError: The resource could not be fetched or decoded
        """
        image = await self.load_image(url)
        return PixelBuffer.from_image(image)

    async def _read_bytes(self, url: str) -> bytes:
        if url.startswith("data:"):
            return self._decode_data_uri(url)

        parsed = urlparse(url)
        if parsed.scheme in ("http", "https"):
            return await self._fetch(url)

        if parsed.scheme == "file":
            path = Path(unquote_to_bytes(parsed.path).decode("utf-8"))
        else:
            path = Path(url)

        # Blocking disk read runs in the default executor
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._read_file, url, path)

    async def _fetch(self, url: str) -> bytes:
        try:
            if self.client is not None:
                response = await self.client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                    response = await client.get(url)
        except httpx.HTTPError as e:
            raise LoadError(url, f"request failed: {e}") from e

        if response.status_code in (401, 403):
            raise AccessError(url, f"access denied (status {response.status_code})")
        if response.status_code != 200:
            raise LoadError(url, f"status {response.status_code}")

        return response.content

    @staticmethod
    def _decode_data_uri(url: str) -> bytes:
        header, sep, payload = url.partition(",")
        if not sep:
            raise LoadError(url, "malformed data URI")

        try:
            if header.endswith(";base64"):
                return base64.b64decode(payload, validate=False)
            return unquote_to_bytes(payload)
        except (binascii.Error, ValueError) as e:
            raise LoadError(url, f"malformed data URI: {e}") from e

    @staticmethod
    def _read_file(url: str, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except PermissionError as e:
            raise AccessError(url, "permission denied") from e
        except FileNotFoundError as e:
            raise LoadError(url, "file not found") from e
        except (OSError, ValueError) as e:
            raise LoadError(url, str(e)) from e


async def load_image(url: str) -> Image.Image:
    """Convenience wrapper around ImageSampler.load_image"""
    return await ImageSampler().load_image(url)


async def load_pixel_buffer(url: str) -> PixelBuffer:
    """Convenience wrapper around ImageSampler.load_pixel_buffer"""
    return await ImageSampler().load_pixel_buffer(url)
