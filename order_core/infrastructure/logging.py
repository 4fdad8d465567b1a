"""
Logging infrastructure.

Package-level logging setup. Modules log through
``logging.getLogger(__name__)`` and propagate to the ``order_core`` logger.
"""
import logging
from typing import Optional

from order_core.settings import AppSettings, get_app_settings


ROOT_LOGGER_NAME = "order_core"


def configure_logging(settings: Optional[AppSettings] = None) -> logging.Logger:
    """
    Apply configured level and format to the package logger.

    Every ``order_core.*`` module logger propagates to it. Calling this
    again replaces the handler instead of stacking a second one.

    Args:
        settings: Settings to apply (defaults to the cached app settings)

    Returns:
        The configured ``order_core`` logger
    """
    settings = settings or get_app_settings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger
