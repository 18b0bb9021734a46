"""Logging setup for the nutrition_coach logger tree."""

import logging

_LOGGER_NAME = "nutrition_coach"
_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO", *, debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Calling it again only updates the level. ``debug`` forces DEBUG.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
