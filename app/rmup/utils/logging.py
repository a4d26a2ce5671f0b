"""Logging setup for the rmup CLI.

Library code only creates module loggers; handlers are installed here,
by the command line entry point.
"""

import logging

from rich.logging import RichHandler

from rmup.utils.formatting import err_console

_HANDLER_FLAG = "_rmup_handler"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling it again replaces the previously installed handler instead of
    adding a second one.

    Args:
        level: Minimum level to emit.

    Returns:
        The configured ``rmup`` logger.
    """
    logger = logging.getLogger("rmup")
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_FLAG, True)

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
