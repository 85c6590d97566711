"""
Configuration & Global Constants
================================
This module serves as the central registry for the calculation limits and the
runtime settings of the application.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (the cost ceiling, notice duration)
   from being scattered throughout the model and the view.
2. Deployment: Logging can be tuned through environment variables without
   touching the code.

Exports:
    COST_CEILING (float): Highest accepted cost of service (inclusive).
    DEFAULT_RATE_NAME (str): Name of the tip rate selected on start.
    NOTICE_TIMEOUT_MS (int): How long a user notice stays in the status bar.
    LOG_LEVEL (int): Level for the 'tiptime' logger.
    LOG_FILE (str | None): Optional path of a log file.
"""
import logging
import os
from typing import Optional


def get_log_level(name: Optional[str]) -> int:
    """
    Resolve a level name like "DEBUG" to its numeric value. Falls back to INFO.
    """
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


# Calculation limits
COST_CEILING: float = 100000.0
DEFAULT_RATE_NAME: str = "FIFTEEN"

# UI
NOTICE_TIMEOUT_MS: int = 2000  # roughly a short toast

# Logging
LOG_LEVEL: int = get_log_level(os.environ.get("TIPTIME_LOG_LEVEL"))
LOG_FILE: Optional[str] = os.environ.get("TIPTIME_LOG_FILE") or None
