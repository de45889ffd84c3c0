"""
Logging setup.

Provides consistent logging across the library.
"""

import logging
import sys
from typing import Optional


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Setup logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR); uses the
            configured ``log_level`` if None
        format_string: Custom format string (uses default if None)
    """
    if level is None:
        from ..config import get_config

        level = get_config().log_level

    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - "
            "%(message)s"
        )

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
