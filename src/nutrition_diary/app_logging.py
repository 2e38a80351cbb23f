"""Logging configuration helpers."""

import logging

APP_LOGGER = "nutrition_diary"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the app logger and set its level.

    Safe to call repeatedly: the level is refreshed, the handler is not
    duplicated.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
