"""Logging configuration."""

import logging
import sys

from cycleledger.config.settings import get_settings


def setup_logging() -> None:
    """Configure ledger logging from settings (unknown levels fall back to INFO)."""
    settings = get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("cycleledger").setLevel(level)
    # Quiet SQL echo and server access chatter
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
