"""
Loguru sink configuration.

Called once from settings. Application modules simply do
``from loguru import logger``.
"""

import sys

from loguru import logger


def configure_logging(level='INFO', log_file=None):
    """Replace loguru's default sink with the project's sinks."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format='{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}',
    )
    if log_file:
        logger.add(log_file, rotation='10 MB', retention=5, level='DEBUG', enqueue=True)
    return logger
