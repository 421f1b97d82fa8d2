"""Console logging for the engine and the headless CLI."""

import logging
import os

LOG_LEVEL_ENV = "TALES_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def resolve_level(default_level: int) -> int:
    """Level named by TALES_LOG_LEVEL (e.g. ``debug``), else ``default_level``."""
    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default_level
    level = getattr(logging, level_name.strip().upper(), None)
    return level if isinstance(level, int) else default_level


def configure_logging(default_level: int = logging.INFO) -> None:
    """Send turn, combat and pursuit logs to stderr.

    The CLI passes WARNING so autopilot narration stays readable; set
    TALES_LOG_LEVEL=debug to watch every phase of every turn.
    """
    logging.basicConfig(level=resolve_level(default_level), format=LOG_FORMAT)
