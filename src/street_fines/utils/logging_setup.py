"""
Logging setup module for the street fines tabulator.

This script initializes a logger named 'street_fines' with both a console
stream handler (for real-time feedback during a run) and a rotating
file handler (for persistent logs). Logs are saved in a 'logs/' directory
located three levels above the current file (at the project root).

Features:
- Console output for debugging
- Rotating log files with size limit and backups
- Automatic creation of a logs directory

Usage:
    from street_fines.utils.logging_setup import logger
    logger.info("Message to log")
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Union

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'

# ---------------------------------------------------------------------
# 1) Create logs folder (relative to project root, not inside src/)
# ---------------------------------------------------------------------
LOG_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), '..', '..', '..', 'logs')
)
os.makedirs(LOG_DIR, exist_ok=True)  # Create the logs directory if it doesn't exist

# ---------------------------------------------------------------------
# 2) Set up named logger for the application
# ---------------------------------------------------------------------
logger = logging.getLogger('street_fines')
logger.setLevel(logging.INFO)  # Default level; see set_log_level()

# ---------------------------------------------------------------------
# 3) Console handler (logs to terminal during execution)
# ---------------------------------------------------------------------
ch = logging.StreamHandler()
ch.setLevel(logging.DEBUG)
ch.setFormatter(logging.Formatter(LOG_FORMAT))
logger.addHandler(ch)

# ---------------------------------------------------------------------
# 4) Rotating file handler (logs written to disk with rotation)
# ---------------------------------------------------------------------
fh = RotatingFileHandler(
    os.path.join(LOG_DIR, 'street_fines.log'),  # Log file path
    maxBytes=5 * 1024 * 1024,                   # 5 MB per file
    backupCount=3,                              # Keep 3 backup files
    encoding='utf-8',
)
fh.setLevel(logging.INFO)  # Only log INFO and above to file
fh.setFormatter(logging.Formatter(LOG_FORMAT))
logger.addHandler(fh)


def set_log_level(level: Union[str, int]) -> None:
    """
    Change the application log level, e.g. from the CLI or settings.yaml.

    Accepts a level name ('DEBUG', 'info') or a logging constant.
    Raises ValueError for unknown level names.
    """
    if isinstance(level, str):
        name = level.upper()
        resolved = logging.getLevelName(name)
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)
