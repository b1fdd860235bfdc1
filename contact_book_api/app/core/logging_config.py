"""
Logging configuration for the Contact Book API.

Application modules and the Uvicorn server share one set of handlers on
the root logger: a console handler and, when ``LOG_FILE`` is set, a
file handler, all using the same format.  ``run.py`` starts Uvicorn
with ``log_config=None`` so that its ``uvicorn.*`` loggers carry no
handlers of their own and propagate here.

Handlers are named, so calling ``setup_logging`` again (one call per
``create_app``) never attaches a duplicate.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "contact_book.console"
FILE_HANDLER_PREFIX = "contact_book.file:"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> List[logging.Handler]:
    """Configure the root logger and route the server loggers through it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.  Applied to
        the root logger and to the ``uvicorn`` loggers.
    logfile : Optional[str]
        Path to a file that also receives every record.

    Returns
    -------
    List[logging.Handler]
        The handlers attached by this call; empty when everything was
        already in place.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    added: List[logging.Handler] = []

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        added.append(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler_name = f"{FILE_HANDLER_PREFIX}{log_path}"
        if not _has_handler(root, file_handler_name):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(file_handler_name)
            added.append(file_handler)

    for handler in added:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(numeric_level)

    return added
