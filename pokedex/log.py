# pokedex/log.py
from __future__ import annotations

import sys

from loguru import logger

from pokedex.config import LOG_LEVEL


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a stderr sink at ``level`` (LOG_LEVEL by default)."""
    logger.remove()
    logger.add(sys.stderr, level=(level or LOG_LEVEL).upper())
