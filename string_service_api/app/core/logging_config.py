"""
Logging configuration for the String Service API.

``setup_logging`` installs this project's handlers on the root logger:
a console handler and, when ``LOG_FILE`` is set, a file handler.  The
handlers are named, so calling it again (one ``create_app`` per test,
or uvicorn starting after the app was imported) neither duplicates them
nor skips the file handler because someone else already attached a
handler to the root logger.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings

CONSOLE_HANDLER = "string_service_api.console"
FILE_HANDLER = "string_service_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _find_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    return next((h for h in logger.handlers if h.get_name() == name), None)


def _install(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``.

    The level comes from ``settings.log_level`` (unknown names fall
    back to ``INFO``).  A file handler for ``settings.log_file`` is
    added, or replaced when the path changed since the last call.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    if _find_handler(root, CONSOLE_HANDLER) is None:
        _install(root, logging.StreamHandler(), CONSOLE_HANDLER)

    current = _find_handler(root, FILE_HANDLER)
    if not settings.log_file:
        return
    log_path = str(Path(settings.log_file).resolve())
    if current is not None:
        if getattr(current, "baseFilename", None) == log_path:
            return
        root.removeHandler(current)
        current.close()
    _install(root, logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER)
