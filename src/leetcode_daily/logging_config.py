"""Loguru sink setup for the command line."""

import sys

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str = "INFO", verbose: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else level, format=CONSOLE_FORMAT)
