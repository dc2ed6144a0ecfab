"""
Brand Balance Engine Modules
"""

from .sampler import ImageSampler
from .logo_analyzer import LogoAnalyzer
from .wordmark_analyzer import WordmarkAnalyzer
from .balance import calculate_balance, balance_to_display_settings, analyze_logo_wordmark_balance
from .sticker import StickerCompositor
from .cropper import ContentCropper

__all__ = [
    "ImageSampler",
    "LogoAnalyzer",
    "WordmarkAnalyzer",
    "calculate_balance",
    "balance_to_display_settings",
    "analyze_logo_wordmark_balance",
    "StickerCompositor",
    "ContentCropper",
]
