"""
Logging setup for the event registration service.

Every module logs through ``logging.getLogger(__name__)``, so all of
the application's records pass through the ``event_registration_api``
package logger.  ``setup_logging`` attaches the handlers there rather
than on the root logger, which leaves the loggers uvicorn installs for
itself untouched.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "event_registration_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    The level is applied on every call, handlers only on the first one,
    so building several apps in one process (as the tests do) does not
    duplicate output.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Also write records to this file.  Missing parent directories
        are created.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_parse_level(level))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
