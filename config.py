"""
Configuration settings for the Brand Balance Engine
"""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Project paths
    PROJECT_ROOT: Path = Path(__file__).parent
    ASSETS_DIR: Path = PROJECT_ROOT / "assets"
    FONTS_DIR: Path = ASSETS_DIR / "fonts"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Image loading
    IMAGE_FETCH_TIMEOUT: float = 30.0  # seconds, for http(s) image URLs

    # Logo analysis
    LOGO_ALPHA_THRESHOLD: int = 30  # alpha above this counts as "filled"
    LOGO_EDGE_THRESHOLD: int = 50  # |alpha - mean neighbour alpha| above this is an edge
    HORIZONTAL_ASPECT_THRESHOLD: float = 1.3
    VERTICAL_ASPECT_THRESHOLD: float = 0.7

    # Wordmark analysis
    WORDMARK_BASE_SIZE: int = 100  # font size used for measurement
    WORDMARK_HEIGHT_FACTOR: float = 1.2  # line height relative to base size

    # Sticker effect
    STICKER_MAX_SIZE: int = 1024  # longer edge cap for processing
    STICKER_BORDER_SIZE: int = 30  # white border thickness in pixels
    STICKER_CORNER_INSET: int = 5  # corner sampling inset for background detection
    STICKER_LUMINANCE_THRESHOLD: int = 128  # content / background split
    CHAMFER_ORTHOGONAL_WEIGHT: int = 3
    CHAMFER_DIAGONAL_WEIGHT: int = 4

    # Content cropping
    CROP_DIFF_THRESHOLD: int = 30  # Manhattan RGBA distance from background
    CROP_PADDING: int = 20

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
