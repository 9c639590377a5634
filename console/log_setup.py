"""Diagnostic logging setup for the console program."""

import logging
import sys

import colorlog

from config import LoggingConfig

_HANDLER_NAME = "blackjack-console"


def setup_logging(logging_config: LoggingConfig) -> logging.Logger:
    """
    Install a colored stderr handler on the root logger.

    Calling this again only updates the level; the handler is added once.
    """
    root = logging.getLogger()
    root.setLevel(logging_config.level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = colorlog.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            colorlog.ColoredFormatter(
                logging_config.format,
                log_colors=logging_config.log_colors,
            )
        )
        root.addHandler(handler)

    return root
