from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "{message}"
)


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> None:
    """
    Replace loguru's default sink with a single stderr sink at ``level``.

    Call this once, before the app starts serving.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
