"""Logging setup for applications that want to see SDK output.

The SDK itself only creates loggers under ``promptsdk``; the package adds a
NullHandler so nothing is printed unless the host configures logging or
calls ``configure_logging``.
"""

from __future__ import annotations

import logging
import sys

from promptsdk.config import get_settings

LOGGER_NAME = 'promptsdk'


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the ``promptsdk`` logger.

    Args:
        level: Log level name or number. Defaults to ``Settings.log_level``.

    Returns:
        The configured ``promptsdk`` logger.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    formatter = logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    sdk_logger = logging.getLogger(LOGGER_NAME)
    sdk_logger.setLevel(level)

    # Replace a handler installed by an earlier call instead of stacking them
    for handler in list(sdk_logger.handlers):
        if getattr(handler, '_promptsdk_console', False):
            sdk_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler._promptsdk_console = True
    sdk_logger.addHandler(console_handler)

    return sdk_logger
