"""
Logging Configuration Module.

Console logging for the bakery backend plus an optional rotating log file.
Levels, line format and the file location come from the server settings
(``BAKERY_LOG_LEVEL``, ``LOG_FORMAT``, ``LOG_FILE_DIR``,
``ENABLE_FILE_LOGGING``); each can be overridden when calling
``setup_logging``.

Formats:
- simple: level, logger and message
- detailed: adds timestamp and source location
- json: one JSON-like object per line, for log shippers
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from bakery_shop.server.core.config import settings

LOG_FILE_NAME = "bakery_shop.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FORMATS: Dict[str, str] = {
    "simple": "%(levelname)-8s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s",
    "json": (
        '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
        '"source": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
    ),
}
DEFAULT_FORMAT = "detailed"

# Levels for our own packages and for chatty libraries
MODULE_LOG_LEVELS: Dict[str, str] = {
    "bakery_shop": "INFO",
    "bakery_shop.server.api": "DEBUG",
    "bakery_shop.server.services": "DEBUG",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "asyncio": "WARNING",
    "uvicorn.access": "INFO",
}


def resolve_format(name: str) -> str:
    """The line format registered under ``name``; unknown names fall back to ``detailed``."""
    return LOG_FORMATS.get(name, LOG_FORMATS[DEFAULT_FORMAT])


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the application.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to ``BAKERY_LOG_LEVEL``
        log_format: ``simple``, ``detailed`` or ``json``; defaults to ``LOG_FORMAT``
        enable_file: Also write to a rotating file; defaults to ``ENABLE_FILE_LOGGING``
        log_file_dir: Directory of the log file; defaults to ``LOG_FILE_DIR``
    """
    level = (log_level or settings.log_level).upper()
    format_name = log_format or settings.log_format
    write_file = settings.enable_file_logging if enable_file is None else enable_file
    formatter = logging.Formatter(resolve_format(format_name), datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    # Handlers filter; the root logger lets everything through
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if write_file:
        directory = Path(log_file_dir or settings.log_file_dir)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            directory / LOG_FILE_NAME, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)
    if settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    root_logger.info(f"Logging configured: level={level}, format={format_name}, file={write_file}")


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; pass ``__name__``."""
    return logging.getLogger(name)
