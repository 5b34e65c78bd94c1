"""
Logging configuration for the COMRADE backend.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'
CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'


def setup_logging(level='INFO', log_file=None):
    """
    Configure logging for the application.

    Handlers are attached to the root logger so module loggers
    (``logging.getLogger(__name__)``) and Flask's ``app.logger`` share them.

    Args:
        level: Level name or number (default: INFO)
        log_file: Optional path for a rotating log file

    Returns:
        The root logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Replace handlers from a previous call (app factory may run more than once)
    for handler in list(root.handlers):
        if getattr(handler, '_comrade', False):
            root.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    console_handler._comrade = True
    root.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding='utf-8',
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler._comrade = True
        root.addHandler(file_handler)

    return root

