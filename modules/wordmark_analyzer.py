"""
Wordmark Analyzer - Estimate the visual weight of a brand name set in a font
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from loguru import logger
from PIL import ImageFont

from config import settings

DESCENDERS = frozenset("gjpqy")
ASCENDERS = frozenset("bdfhklt")

# Checked in order: "semibold" must be tested before "bold"
FONT_WEIGHT_KEYWORDS: List[Tuple[Tuple[str, ...], float]] = [
    (("thin", "hairline"), 0.7),
    (("light",), 0.85),
    (("medium",), 1.0),
    (("semibold",), 1.15),
    (("bold",), 1.3),
    (("black", "heavy"), 1.5),
]


@dataclass
class WordmarkAnalysisResult:
    """Visual characteristics of a wordmark"""
    visual_weight: float  # roughly 0-1
    character_count: int
    estimated_width: float  # pixels at base size
    estimated_height: float  # pixels at base size
    font_weight: float  # 0.7 (thin) - 1.5 (black)
    has_descenders: bool
    has_ascenders: bool

    def to_dict(self) -> Dict:
        return {
            "visualWeight": self.visual_weight,
            "characterCount": self.character_count,
            "estimatedWidth": self.estimated_width,
            "estimatedHeight": self.estimated_height,
            "fontWeight": self.font_weight,
            "hasDescenders": self.has_descenders,
            "hasAscenders": self.has_ascenders,
        }


def infer_font_weight(font: str) -> float:
    """
    Guess a weight multiplier from keywords in the font name

    Returns:
        0.7 (thin) to 1.5 (black/heavy), 1.0 when nothing matches
    """
    font_lower = (font or "").lower()
    for keywords, weight in FONT_WEIGHT_KEYWORDS:
        if any(keyword in font_lower for keyword in keywords):
            return weight
    return 1.0


class WordmarkAnalyzer:
    """
    Measures a brand name with Pillow and scores its visual weight
    """

    def __init__(self, fonts_dir: Path = None):
        """
        Initialize Wordmark Analyzer

        Args:
            fonts_dir: Directory searched for font files (default: settings.FONTS_DIR)
        """
        self.fonts_dir = Path(fonts_dir) if fonts_dir else settings.FONTS_DIR
        logger.info(f"WordmarkAnalyzer initialized with fonts from {self.fonts_dir}")

    def analyze(self, text: str, font: str, base_size: int = None) -> WordmarkAnalysisResult:
        """
        Analyze a wordmark

        Args:
            text: Brand name
            font: Font family name or path to a font file
            base_size: Font size used for measurement (default: settings.WORDMARK_BASE_SIZE)

        Returns:
            WordmarkAnalysisResult
        """
        base_size = base_size or settings.WORDMARK_BASE_SIZE

        estimated_width = self.measure_text(text, font, base_size)
        estimated_height = base_size * settings.WORDMARK_HEIGHT_FACTOR

        character_count = len(text)
        lowered = text.lower()
        has_descenders = any(char in DESCENDERS for char in lowered)
        has_ascenders = any(char in ASCENDERS for char in lowered)

        font_weight = infer_font_weight(font)

        # Longer names feel heavier
        length_factor = min(character_count / 8, 1.5)

        # Wide faces carry more weight per character
        if character_count > 0:
            width_factor = min((estimated_width / character_count) / base_size, 1.2)
        else:
            width_factor = 0.0

        visual_weight = (
            font_weight * 0.5 +
            length_factor * 0.3 +
            width_factor * 0.2
        ) / 2

        logger.debug(
            f"Wordmark analysis '{text}' ({font}): weight={visual_weight:.3f}, "
            f"width={estimated_width:.1f}, font_weight={font_weight}"
        )

        return WordmarkAnalysisResult(
            visual_weight=visual_weight,
            character_count=character_count,
            estimated_width=estimated_width,
            estimated_height=estimated_height,
            font_weight=font_weight,
            has_descenders=has_descenders,
            has_ascenders=has_ascenders,
        )

    def measure_text(self, text: str, font: str, size: int) -> float:
        """
        Rendered advance width of text at the given size

        Returns:
            Width in pixels
        """
        if not text:
            return 0.0

        image_font = self.load_font(font, size)
        return float(image_font.getlength(text))

    def load_font(self, font: str, size: int):
        """
        Resolve a font descriptor to a Pillow font

        Tries, in order: a font file path, a matching file in fonts_dir,
        a system font lookup by name, and finally Pillow's default font.
        """
        for candidate in self._font_candidates(font):
            try:
                return ImageFont.truetype(candidate, size)
            except OSError:
                continue

        logger.warning(f"Font not found: {font}, using default")
        return ImageFont.load_default(size=size)

    def _font_candidates(self, font: str) -> List[str]:
        if not font:
            return []

        candidates = []
        path = Path(font)
        if path.suffix.lower() in (".ttf", ".otf", ".ttc"):
            candidates.append(str(path))

        family = font.strip()
        stems = [family, family.replace(" ", "-"), family.replace(" ", "")]
        if self.fonts_dir.exists():
            for stem in stems:
                for ext in (".ttf", ".otf"):
                    font_path = self.fonts_dir / f"{stem}{ext}"
                    if font_path.exists():
                        candidates.append(str(font_path))

        for stem in stems:
            candidates.append(f"{stem}.ttf")

        return candidates


def analyze_wordmark(text: str, font: str, base_size: int = None) -> WordmarkAnalysisResult:
    """Analyze a wordmark with the configured fonts directory"""
    return WordmarkAnalyzer().analyze(text, font, base_size)
