"""
Logging setup for HomeBrew Helper.

Modules log through `logging.getLogger(__name__)`; this module only configures
the root handler and level once per process.
"""

import logging
from typing import Optional

from homebrew.config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name to use; defaults to HOMEBREW_LOG_LEVEL.
    """
    global _configured
    if _configured:
        return

    level_name = (level or AppConfig.get_log_level()).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    _configured = True
