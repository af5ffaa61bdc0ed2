"""
logging_config.py — Process-wide logging setup.

Modules get their own logger with logging.getLogger(__name__); this file
only configures the root handler once, at application start-up.
"""

import logging

from casa_cases.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a stream handler on the root logger at the configured level."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
