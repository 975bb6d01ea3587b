"""
Logging setup for the dashboard and local runs.

Library modules only create module-level loggers; handlers are configured once
here by the entrypoint.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging to stdout.

    The level comes from the argument, then the LOG_LEVEL environment
    variable, then INFO. Unknown level names fall back to INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )
    return logging.getLogger("claim_forecast")
