r"""
Logging configuration module for applications embedding ircwire.

Provides a clean, configurable console setup using the colorlog library.
The codec itself never installs console handlers; an application calls
:class:`LoggerConfigurator` once at startup.
"""

import logging
import os
import sys

import colorlog

from .logs.logger import logger as wire_logger

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def build_formatter() -> colorlog.ColoredFormatter:
    """Return the colored formatter used for console output."""
    return colorlog.ColoredFormatter(
        "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
        secondary_log_colors={
            "message": {
                "ERROR": "red",
                "CRITICAL": "magenta",
            }
        },
        reset=True,
    )


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr

    @staticmethod
    def resolve_level() -> int:
        debug_env = os.environ.get("DEBUG", "").lower()
        return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

    def configure(self) -> logging.Handler:
        """Configure the root logger with colored output.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        log_level = self.resolve_level()
        formatter = build_formatter()

        handler = logging.StreamHandler(self.stream)
        handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        # Route codec events through the root handler only.
        wire_logger.logger.handlers.clear()
        wire_logger.set_level(log_level)

        wire_logger.log_event(
            "app",
            "logging_configured",
            level=logging.DEBUG,
            level_name=logging.getLevelName(log_level),
        )
        return handler
