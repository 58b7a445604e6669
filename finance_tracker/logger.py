"""Logging setup shared by the finance tracker modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from . import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(
    name: str = "finance_tracker",
    level: Optional[Union[int, str]] = None,
) -> logging.Logger:
    """Configure and return a logger with a console handler.

    Calling this more than once for the same name returns the already
    configured logger without stacking extra handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else config.LOG_LEVEL)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
