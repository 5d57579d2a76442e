"""Logging configuration for the nsctl package."""
import logging
import sys

from .config import Config

NOISY_LOGGERS = ("kubernetes", "urllib3")


def setup_logging(debug_mode: bool = False) -> None:
    """Configure logging based on debug mode."""
    log_level = logging.DEBUG if debug_mode else Config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=Config.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    if debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Debug mode enabled")
    else:
        # Disable debug logging for noisy libraries
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
