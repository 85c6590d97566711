"""
Logging setup for Tip Time.

Every module logs through `logging.getLogger(__name__)`, so configuring the
'tiptime' logger here covers the model, the controller and the window.
Level and file come from `tiptime.config` (TIPTIME_LOG_LEVEL, TIPTIME_LOG_FILE).
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send 'tiptime' records to stdout and, if `log_file` is given, to that file.

    Calling it again replaces the handlers of the previous call. The file is
    truncated on every start.
    """
    logger = logging.getLogger("tiptime")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    target = f"stdout and {log_file}" if log_file else "stdout"
    logger.debug(f"Logging to {target} at {logging.getLevelName(level)}.")
    return logger
