"""
Balance Calculator - Turn logo and wordmark visual weights into layout settings
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from loguru import logger

from modules.logo_analyzer import LogoAnalysisResult, LogoAnalyzer
from modules.sampler import ImageSampler
from modules.wordmark_analyzer import WordmarkAnalysisResult, WordmarkAnalyzer

HEAVY_LOGO_RATIO = 1.3
HEAVY_TEXT_RATIO = 0.7
LONG_NAME_CHARS = 15
SHORT_NAME_CHARS = 5
BASE_GAP = 40  # pixels at 100px base size

LOGO_HEAVIER = (
    "Logo appears visually heavier than text. "
    "Reducing logo size and/or increasing text size for balance."
)
TEXT_HEAVIER = (
    "Text appears visually heavier than logo. "
    "Increasing logo size and/or reducing text size for balance."
)
BALANCED = "Logo and text are reasonably balanced. Minor adjustments for optical refinement."
HORIZONTAL_LOGO = "Horizontal logo adjusted for better proportions."
VERTICAL_LOGO = "Vertical logo adjusted for better proportions."
LONG_NAME = "Long brand name reduced for readability."
SHORT_NAME = "Short brand name increased for presence."


@dataclass
class BalanceResult:
    """Scale factors that bring a logo and its wordmark into equilibrium"""
    logo_scale: float  # 0.5-2.0
    wordmark_scale: float  # 0.5-2.0
    suggested_gap: float  # 20-80 pixels at base size
    confidence: float  # 0.4-1.0
    reasoning: List[str] = field(default_factory=list)

    @property
    def explanation(self) -> str:
        return " ".join(self.reasoning)

    def to_dict(self) -> Dict:
        return {
            "logoScale": self.logo_scale,
            "wordmarkScale": self.wordmark_scale,
            "suggestedGap": self.suggested_gap,
            "confidence": self.confidence,
            "reasoning": self.explanation,
        }


@dataclass
class DisplaySettings:
    """Layout fragment stored in a logo's display configuration"""
    vertical_logo_text_balance: float  # 10-90, 50 = equal size
    horizontal_logo_text_gap: float
    vertical_logo_text_gap: float

    def to_dict(self) -> Dict:
        return {
            "verticalLogoTextBalance": self.vertical_logo_text_balance,
            "horizontalLogoTextGap": self.horizontal_logo_text_gap,
            "verticalLogoTextGap": self.vertical_logo_text_gap,
        }


@dataclass
class BalanceAnalysis:
    """Everything computed for one logo / brand name pair"""
    logo_analysis: LogoAnalysisResult
    wordmark_analysis: WordmarkAnalysisResult
    balance: BalanceResult
    display_settings: DisplaySettings

    def to_dict(self) -> Dict:
        return {
            "logoAnalysis": self.logo_analysis.to_dict(),
            "wordmarkAnalysis": self.wordmark_analysis.to_dict(),
            "balance": self.balance.to_dict(),
            "displaySettings": self.display_settings.to_dict(),
        }


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _weight_ratio(logo_weight: float, wordmark_weight: float) -> float:
    if wordmark_weight > 0:
        return logo_weight / wordmark_weight
    # A weightless wordmark makes any visible logo infinitely heavier
    return math.inf if logo_weight > 0 else 1.0


def calculate_balance(
    logo_analysis: LogoAnalysisResult,
    wordmark_analysis: WordmarkAnalysisResult
) -> BalanceResult:
    """
    Calculate scale factors that balance a logo against its wordmark

    Args:
        logo_analysis: Result of LogoAnalyzer.analyze
        wordmark_analysis: Result of WordmarkAnalyzer.analyze

    Returns:
        BalanceResult with clamped scales, gap and confidence
    """
    logo_weight = logo_analysis.visual_weight
    wordmark_weight = wordmark_analysis.visual_weight
    ratio = _weight_ratio(logo_weight, wordmark_weight)

    reasoning: List[str] = []

    if ratio > HEAVY_LOGO_RATIO:
        logo_scale = max(0.6, 1 / math.sqrt(ratio))
        wordmark_scale = min(1.4, math.sqrt(ratio * 0.8))
        reasoning.append(LOGO_HEAVIER)
    elif ratio < HEAVY_TEXT_RATIO:
        logo_scale = min(1.6, math.sqrt(1 / ratio)) if ratio > 0 else 1.6
        wordmark_scale = max(0.7, math.sqrt(ratio))
        reasoning.append(TEXT_HEAVIER)
    else:
        logo_scale = 1.0 + (1.0 - ratio) * 0.3
        wordmark_scale = 1.0 - (1.0 - ratio) * 0.2
        reasoning.append(BALANCED)

    # Horizontal marks already take width; vertical ones can grow
    if logo_analysis.orientation == "horizontal":
        logo_scale *= 0.9
        reasoning.append(HORIZONTAL_LOGO)
    elif logo_analysis.orientation == "vertical":
        logo_scale *= 1.1
        reasoning.append(VERTICAL_LOGO)

    if wordmark_analysis.character_count > LONG_NAME_CHARS:
        wordmark_scale *= 0.85
        reasoning.append(LONG_NAME)
    elif wordmark_analysis.character_count < SHORT_NAME_CHARS:
        wordmark_scale *= 1.15
        reasoning.append(SHORT_NAME)

    total_weight = logo_weight + wordmark_weight
    suggested_gap = _clamp(BASE_GAP * total_weight, 20, 80)

    heavier = max(logo_weight, wordmark_weight)
    weight_balance = min(logo_weight, wordmark_weight) / heavier if heavier > 0 else 1.0
    extremity_factor = 1 - abs(0.5 - total_weight / 2)
    confidence = _clamp(weight_balance * 0.6 + extremity_factor * 0.4, 0.4, 1.0)

    result = BalanceResult(
        logo_scale=_clamp(logo_scale, 0.5, 2.0),
        wordmark_scale=_clamp(wordmark_scale, 0.5, 2.0),
        suggested_gap=suggested_gap,
        confidence=confidence,
        reasoning=reasoning,
    )

    logger.debug(
        f"Balance: logo x{result.logo_scale:.2f}, text x{result.wordmark_scale:.2f}, "
        f"gap={result.suggested_gap:.1f}, confidence={result.confidence:.2f}"
    )

    return result


def balance_to_display_settings(balance: BalanceResult) -> DisplaySettings:
    """
    Map a balance result onto the 10-90 layout slider

    50 means equal size; lower favours a larger logo, higher a larger wordmark.
    Each doubling of the text/logo ratio moves the slider by 50, so a ratio
    of 2**-0.5 maps to 25 and 2**0.5 to 75; 0.5 and 2.0 hit the 10 and 90 stops.
    """
    ratio = balance.wordmark_scale / balance.logo_scale
    balance_value = 50 * (1 + math.log2(ratio))

    return DisplaySettings(
        vertical_logo_text_balance=_clamp(balance_value, 10, 90),
        horizontal_logo_text_gap=balance.suggested_gap,
        vertical_logo_text_gap=balance.suggested_gap * 1.2,
    )


async def analyze_logo_wordmark_balance(
    logo_url: str,
    brand_name: str,
    font: str,
    base_size: int = None,
    sampler: ImageSampler = None
) -> BalanceAnalysis:
    """
    Load a logo, analyze it with the brand name, and compute layout settings

    Args:
        logo_url: Logo image locator (URL, data URI or path)
        brand_name: Wordmark text
        font: Wordmark font descriptor
        base_size: Measurement size for the wordmark
        sampler: Optional ImageSampler (e.g. with a shared HTTP client)

    Raises:
        LoadError: The logo could not be loaded; callers fall back to defaults
    """
    sampler = sampler or ImageSampler()

    buffer = await sampler.load_pixel_buffer(logo_url)
    logo_analysis = LogoAnalyzer().analyze(buffer)
    wordmark_analysis = WordmarkAnalyzer().analyze(brand_name, font, base_size)

    balance = calculate_balance(logo_analysis, wordmark_analysis)
    display_settings = balance_to_display_settings(balance)

    logger.info(
        f"Balanced '{brand_name}': slider={display_settings.vertical_logo_text_balance:.1f}, "
        f"gap={display_settings.horizontal_logo_text_gap:.1f}"
    )

    return BalanceAnalysis(
        logo_analysis=logo_analysis,
        wordmark_analysis=wordmark_analysis,
        balance=balance,
        display_settings=display_settings,
    )
