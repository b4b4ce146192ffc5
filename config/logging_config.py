"""Logging configuration for Eventcast."""

import logging
import sys

from config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the root logger with a single console handler.

    Streamlit re-executes the script on every interaction, so existing
    handlers are cleared first to avoid duplicated lines.
    """
    level_name = (level or settings.get_log_level()).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console_handler)

    # Third-party HTTP chatter stays at WARNING unless debugging
    if root.level > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("geopy").setLevel(logging.WARNING)

    return logging.getLogger("eventcast")
