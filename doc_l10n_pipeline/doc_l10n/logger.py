import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "doc-l10n"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


def setup_logger(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the "doc-l10n" logger once; later calls only change its level,
    so one process can run several serializations at different verbosity.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger
