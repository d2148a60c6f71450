"""
Logging configuration

Uses loguru. Call setup_logging() once at application startup.
"""

import sys
from typing import Optional

from loguru import logger

from .settings import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Replace loguru's default handler with a single stderr sink

    Args:
        level: Log level (default: AADHAAR_LOG_LEVEL setting)
    """
    level = (level or get_settings().log_level).upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )
    logger.debug("Logging initialized (level={})", level)
