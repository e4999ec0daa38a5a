"""
Logging setup for the backend.

``setup_logging`` attaches a console handler to the root logger and,
when ``LOG_FILE`` is configured, a UTF-8 file handler.  Handlers
installed here are tagged so repeated calls (tests, a second
``create_app``) never duplicate them, while handlers installed by
someone else, such as pytest's capture handler, are left alone.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_OWNED = "_contact_manager_owned"


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED, False)]


def _install(logger: logging.Logger, handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _OWNED, True)
    logger.addHandler(handler)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> List[logging.Handler]:
    """Configure the root logger and return the handlers added by this call.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive; unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to append log records to.  Resolved against the current
        working directory.  Each distinct path gets one handler.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    owned = _owned_handlers(root)
    added: List[logging.Handler] = []

    if not any(type(h) is logging.StreamHandler for h in owned):
        added.append(_install(root, logging.StreamHandler()))

    if logfile:
        log_path = str(Path(logfile).resolve())
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_path for h in owned):
            added.append(_install(root, logging.FileHandler(log_path, encoding="utf-8")))

    return added
