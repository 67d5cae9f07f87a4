"""
Logging for the ``products_api`` logger hierarchy.

Every module logs through ``logging.getLogger(__name__)``, so all
records (request lines, store changes, error responses) land under the
``products_api`` logger.  ``setup_logging`` attaches this project's
handlers to that logger only, leaving the root logger and the server's
own loggers alone.  Calling it again, e.g. for a second app built in
tests, swaps the previous handlers for ones matching the new settings.
"""

import logging
from typing import List

from .config import Settings


PACKAGE_LOGGER = "products_api"

# Marks handlers installed here so reconfiguration never touches others.
_HANDLER_FLAG = "_products_api_handler"


def _build_handlers(settings: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
    return handlers


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the package logger from ``settings`` and return it.

    The level comes from ``settings.log_level`` (unknown names fall back
    to ``INFO``); records go to the console and, when
    ``settings.log_file`` is set, to that file, formatted with
    ``settings.log_format``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)
    for handler in _build_handlers(settings):
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)

    return logger
