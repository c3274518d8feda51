"""
Logging configuration for the application.

Log records go through the root logger, formatted with timestamp,
logger name, level and message.  The HTTP layer writes to two named
loggers configured here:

* ``ACCESS_LOGGER``: one INFO line per request (``METHOD path?query``).
  It can be silenced with ``ACCESS_LOG=false`` without touching the
  level of the rest of the application.
* ``ERROR_LOGGER``: unexpected failures with their traceback.  It stays
  enabled at ERROR whatever the root level is.
"""

import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER = "product_catalog_api.access"
ERROR_LOGGER = "product_catalog_api.errors"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_request_loggers(access_log: bool = True) -> None:
    """Set the levels of the access and error loggers.

    The access logger is pinned to INFO so request lines are written
    even when the root level is WARNING; when ``access_log`` is false it
    is raised to WARNING, which drops them.
    """
    logging.getLogger(ACCESS_LOGGER).setLevel(logging.INFO if access_log else logging.WARNING)
    logging.getLogger(ERROR_LOGGER).setLevel(logging.ERROR)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = True) -> None:
    """Configure the request loggers and, once, the root logger.

    The named loggers are (re)configured on every call so each app gets
    its own ``access_log`` choice.  Root handlers are only attached if
    none exist yet (tests, or ``create_app`` called twice).

    Parameters
    ----------
    level : str
        Root logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path to a file that receives the same records as the console.
    access_log : bool
        Whether per‑request access lines are written.
    """
    configure_request_loggers(access_log)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
