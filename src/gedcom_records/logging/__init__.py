"""
Logging package for ``gedcom_records``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers.
"""

from .logger import get_logger, list_active_loggers, reset_logging

__all__ = [
    "get_logger",
    "list_active_loggers",
    "reset_logging",
]
