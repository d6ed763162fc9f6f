"""Process-wide logging setup for the API server and the dashboard CLI."""

import logging
from typing import Optional

from peoplehub.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Apply ``LOG_LEVEL`` (or *level*) to the root logger."""
    resolved = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(resolved)
