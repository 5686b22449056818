"""
Centralized logging configuration for gedcom_records.

Key behaviors
-------------
* Single entry point via ``get_logger`` so every module shares one
  formatter and one set of handlers under the ``gedcom_records`` namespace.
* Console output on stderr at ``logging.console_level`` (DEBUG when the
  top-level ``debug`` flag is set). Diagnostics that are warnings show up
  here; informational ones only at DEBUG.
* With ``logging.to_file`` enabled: a master log plus one file per module,
  optionally rotated.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

from gedcom_records.config import get_config

# -----------------------------------------------------------------------------
# Constants and module state
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_records"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


class _Settings(NamedTuple):
    level: int
    console_level: int
    to_file: bool
    rotate: bool
    log_dir: Path
    master_file: str


_settings: Optional[_Settings] = None
_logger_cache: Dict[str, Logger] = {}


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _level(name: object, default: int) -> int:
    return getattr(logging, str(name).upper(), default)


def _read_settings() -> _Settings:
    cfg = get_config()
    section = cfg.logging

    level = logging.DEBUG if cfg.debug else _level(section.get("level"), logging.INFO)
    console_level = (
        logging.DEBUG if cfg.debug else _level(section.get("console_level"), logging.WARNING)
    )

    log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    return _Settings(
        level=level,
        console_level=console_level,
        to_file=bool(section.get("to_file", False)),
        rotate=bool(section.get("rotate", False)),
        log_dir=log_dir,
        master_file=section.get("file") or "gedcom_records.log",
    )


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: _Settings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename

    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _configure_base_logger() -> _Settings:
    """Attach console (and master file) handlers to the base logger once."""
    global _settings
    if _settings is not None:
        return _settings

    settings = _read_settings()
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False

    if settings.to_file:
        base.addHandler(_file_handler(settings, settings.master_file))

    console = StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _settings = settings
    return settings


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    ``get_logger("parser_core")`` and ``get_logger("gedcom_records.parser_core")``
    name the same logger. Module loggers propagate to the base logger; with
    ``logging.to_file`` each one also writes ``logs/<module>.log``.
    """
    settings = _configure_base_logger()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(settings.level)

    if logger_name != BASE_LOGGER_NAME:
        logger.propagate = True
        has_own_file = any(getattr(h, "is_module_handler", False) for h in logger.handlers)
        if settings.to_file and not has_own_file:
            handler = _file_handler(settings, f"{logger_name.replace('.', '_')}.log")
            handler.is_module_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)

    _logger_cache[logger_name] = logger
    return logger


def reset_logging() -> None:
    """Drop configured handlers so the next ``get_logger`` re-reads config."""
    global _settings

    for name in list(_logger_cache) + [BASE_LOGGER_NAME]:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    _logger_cache.clear()
    _settings = None


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
