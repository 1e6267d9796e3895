"""
Logging setup for the API process and client tools
"""
import logging
from typing import Optional

from ledger_master.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a single stream handler to the package logger"""
    global _configured
    logger = logging.getLogger("ledger_master")
    logger.setLevel((level or Settings.LOG_LEVEL).upper())
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _configured = True
