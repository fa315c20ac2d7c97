"""Diagnostic logging configuration for the CLI.

Library modules only create module-level loggers; handlers are attached
here, once, by the entry point.  ``--verbose`` switches to DEBUG and
renders records through Rich when it is installed.
"""

from __future__ import annotations

import logging

_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the ``tuido`` logger."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("tuido")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + _FORMAT))
    else:
        from tuido.cli.console import get_rich_console

        handler = RichHandler(
            console=get_rich_console(stderr=True),
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter(_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False
