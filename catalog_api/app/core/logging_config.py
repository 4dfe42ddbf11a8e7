"""
Logging configuration for the Catalog API.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  Unspecified arguments fall
back to ``settings``; ``DEBUG=true`` forces the ``catalog_api`` loggers
to DEBUG so service and storage messages are visible whatever the root
level is.  The function configures logging at most once per process.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Optional[str] = None,
    logfile: Optional[str] = None,
    debug: Optional[bool] = None,
) -> bool:
    """Configure the root logger.

    Parameters
    ----------
    level : Optional[str]
        Root level name, case insensitive.  Defaults to
        ``settings.log_level``; unknown names fall back to INFO.
    logfile : Optional[str]
        File to log to in addition to the console.  Defaults to
        ``settings.log_file``.
    debug : Optional[bool]
        Lower the ``catalog_api`` logger to DEBUG.  Defaults to
        ``settings.debug``.

    Returns
    -------
    bool
        ``False`` if the root logger already had handlers and was left
        untouched, ``True`` otherwise.
    """
    level = level or settings.log_level
    logfile = logfile if logfile is not None else settings.log_file
    debug = settings.debug if debug is None else debug

    if debug:
        logging.getLogger("catalog_api").setLevel(logging.DEBUG)

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a repeated create_app call.
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return True
