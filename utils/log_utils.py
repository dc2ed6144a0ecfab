"""
Logging setup
"""

import sys

from loguru import logger

from config import settings


def setup_logging(level: str = None, log_file: str = None) -> None:
    """
    Replace loguru's default sink

    Args:
        level: Minimum level for stderr (default: settings.LOG_LEVEL)
        log_file: Optional rotating log file that records DEBUG and above
    """
    logger.remove()
    logger.add(sys.stderr, level=level or settings.LOG_LEVEL)
    if log_file:
        logger.add(log_file, rotation="500 MB", retention="10 days", level="DEBUG")
