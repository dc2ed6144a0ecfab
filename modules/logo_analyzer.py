"""
Logo Analyzer - Score how visually heavy a logo mark is from its pixels
"""

from dataclasses import dataclass, field
from typing import Dict

import numpy as np
from loguru import logger

from config import settings
from utils.image_utils import PixelBuffer

DEFAULT_LUMINANCE = 128.0


@dataclass
class BoundingBox:
    """Pixel rectangle (inclusive of the first pixel, width/height in pixels)"""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def to_dict(self) -> Dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass
class LogoAnalysisResult:
    """Visual characteristics of a logo mark"""
    visual_weight: float  # 0-1: overall visual presence
    density: float  # 0-1: share of filled pixels
    contrast: float  # 0-1: average luminance of filled pixels
    complexity: float  # 0-1: edge pixels per filled pixel
    aspect_ratio: float  # bounding box width / height
    orientation: str  # "horizontal", "vertical" or "square"
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    def to_dict(self) -> Dict:
        return {
            "visualWeight": self.visual_weight,
            "density": self.density,
            "contrast": self.contrast,
            "complexity": self.complexity,
            "aspectRatio": self.aspect_ratio,
            "dominantOrientation": self.orientation,
            "boundingBox": self.bounding_box.to_dict(),
        }


class LogoAnalyzer:
    """
    Analyzes a logo raster for density, contrast, complexity and orientation

    Weights: density 45%, contrast extremity 30%, edge complexity 25%.
    """

    def __init__(
        self,
        alpha_threshold: int = None,
        edge_threshold: int = None,
        horizontal_threshold: float = None,
        vertical_threshold: float = None
    ):
        """
        Initialize Logo Analyzer

        Args:
            alpha_threshold: Alpha above which a pixel counts as filled
            edge_threshold: Alpha jump against the neighbour mean that marks an edge
            horizontal_threshold: Aspect ratio above which the logo is horizontal
            vertical_threshold: Aspect ratio below which the logo is vertical
        """
        self.alpha_threshold = settings.LOGO_ALPHA_THRESHOLD if alpha_threshold is None else alpha_threshold
        self.edge_threshold = settings.LOGO_EDGE_THRESHOLD if edge_threshold is None else edge_threshold
        self.horizontal_threshold = horizontal_threshold or settings.HORIZONTAL_ASPECT_THRESHOLD
        self.vertical_threshold = vertical_threshold or settings.VERTICAL_ASPECT_THRESHOLD

        logger.info(
            f"LogoAnalyzer initialized (alpha>{self.alpha_threshold}, edge>{self.edge_threshold})"
        )

    def analyze(self, buffer: PixelBuffer) -> LogoAnalysisResult:
        """
        Analyze a logo pixel buffer

        Args:
            buffer: Decoded logo raster

        Returns:
            LogoAnalysisResult
        """
        pixels = buffer.as_array()
        alpha = pixels[:, :, 3].astype(np.float64)
        filled = alpha > self.alpha_threshold

        total_pixels = buffer.total_pixels
        filled_pixels = int(filled.sum())

        # Pass 1: coverage, luminance, bounding box
        if filled_pixels > 0:
            rgb = pixels[filled][:, :3].astype(np.float64)
            total_luminance = float(
                (0.299 * rgb[:, 0] + 0.587 * rgb[:, 1] + 0.114 * rgb[:, 2]).sum()
            )
            avg_luminance = total_luminance / filled_pixels
            bounding_box = self._bounding_box(filled)
        else:
            avg_luminance = DEFAULT_LUMINANCE
            bounding_box = BoundingBox()

        # Pass 2: edges on interior pixels only
        edge_pixels = self._count_edges(alpha, filled)

        density = filled_pixels / total_pixels if total_pixels > 0 else 0.0
        contrast = avg_luminance / 255.0
        complexity = edge_pixels / filled_pixels if filled_pixels > 0 else 0.0

        if bounding_box.height > 0:
            aspect_ratio = bounding_box.width / bounding_box.height
        else:
            aspect_ratio = 1.0

        orientation = self._orientation(aspect_ratio)

        # Near-black or near-white content reads stronger than mid-gray
        contrast_factor = abs(contrast - 0.5) * 2
        visual_weight = (
            density * 0.45 +
            contrast_factor * 0.30 +
            complexity * 0.25
        )

        result = LogoAnalysisResult(
            visual_weight=visual_weight,
            density=density,
            contrast=contrast,
            complexity=complexity,
            aspect_ratio=aspect_ratio,
            orientation=orientation,
            bounding_box=bounding_box,
        )

        logger.debug(
            f"Logo analysis: weight={visual_weight:.3f}, density={density:.3f}, "
            f"contrast={contrast:.3f}, complexity={complexity:.3f}, {orientation}"
        )

        return result

    def _count_edges(self, alpha: np.ndarray, filled: np.ndarray) -> int:
        """
        Simplified edge detector: an interior filled pixel whose alpha differs
        from the mean of its 4 neighbours by more than edge_threshold
        """
        height, width = alpha.shape
        if height < 3 or width < 3:
            return 0

        center = alpha[1:-1, 1:-1]
        neighbours = (
            alpha[:-2, 1:-1] +  # top
            alpha[2:, 1:-1] +  # bottom
            alpha[1:-1, :-2] +  # left
            alpha[1:-1, 2:]  # right
        ) / 4.0

        edges = filled[1:-1, 1:-1] & (np.abs(center - neighbours) > self.edge_threshold)
        return int(edges.sum())

    @staticmethod
    def _bounding_box(filled: np.ndarray) -> BoundingBox:
        rows = np.flatnonzero(filled.any(axis=1))
        cols = np.flatnonzero(filled.any(axis=0))
        min_y, max_y = int(rows[0]), int(rows[-1])
        min_x, max_x = int(cols[0]), int(cols[-1])

        return BoundingBox(
            x=min_x,
            y=min_y,
            width=max_x - min_x + 1,
            height=max_y - min_y + 1,
        )

    def _orientation(self, aspect_ratio: float) -> str:
        if aspect_ratio > self.horizontal_threshold:
            return "horizontal"
        if aspect_ratio < self.vertical_threshold:
            return "vertical"
        return "square"


def analyze_logo_image(buffer: PixelBuffer) -> LogoAnalysisResult:
    """Analyze a logo buffer with the configured thresholds"""
    return LogoAnalyzer().analyze(buffer)
