"""
Logging setup.

Modules log through `logging.getLogger(__name__)`; this only sets the
root handler and level once, from settings.
"""

import logging
from typing import Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger. `level` overrides LOG_LEVEL."""
    settings = get_settings()
    resolved = (level or settings.log_level).upper()
    if settings.debug:
        resolved = "DEBUG"
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
