"""
SDK logger setup

The package only creates named loggers; handlers are attached when the
application calls ``setup_sdk_logger``.
"""

import logging
from typing import Optional

from .config import LoggingConfig

SDK_LOGGER_NAME = "airship_push"


def setup_sdk_logger(
    name: str = SDK_LOGGER_NAME,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None
) -> logging.Logger:
    """
    Configure and return the SDK logger

    Args:
        name: Logger name, defaults to the package logger
        level: Log level override (e.g. "DEBUG")
        config: Logging configuration, defaults to ``LoggingConfig.from_env()``

    Returns:
        The configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel((level or config.log_level).upper())

    formatter = logging.Formatter(config.log_format)

    # Repeated setup must not stack handlers
    for handler in list(logger.handlers):
        if getattr(handler, "_airship_push", False):
            logger.removeHandler(handler)

    if config.enable_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console._airship_push = True
        logger.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler._airship_push = True
        logger.addHandler(file_handler)

    return logger


logging.getLogger(SDK_LOGGER_NAME).addHandler(logging.NullHandler())
