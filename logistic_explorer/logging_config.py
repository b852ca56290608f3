"""
Logging Configuration
Routes the 'logistic_explorer' loggers to stdout for both front ends.
"""
import logging
import sys
from typing import Union

from . import config

PACKAGE_LOGGER = "logistic_explorer"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = config.LOG_LEVEL) -> logging.Logger:
    """
    Attach one stdout handler to the package logger and set its level.

    Calling it again replaces the handler, so Dash's reloader and Streamlit
    reruns never print a line twice.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)

    logger.debug("Logging initialized at %s", logging.getLevelName(logger.level))
    return logger


def logging_configured() -> bool:
    return bool(logging.getLogger(PACKAGE_LOGGER).handlers)
