"""Logging setup for the lending library.

Library modules only create loggers; handlers are installed by the entry point
through ``configure_logging``. Output goes to stderr so that anything printed
to stdout (the demo) stays clean.
"""

import logging
import sys

from .config import LibraryConfig, get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "lending_library"


def configure_logging(config: LibraryConfig | None = None) -> logging.Logger:
    """Install a stderr handler on the package logger and apply the level.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    config = config or get_config()

    package_logger = logging.getLogger("lending_library")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(config.effective_log_level)

    if config.debug:
        package_logger.debug("Debug mode enabled - verbose lending logs active")

    return package_logger
