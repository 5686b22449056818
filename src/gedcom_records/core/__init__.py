from __future__ import annotations

from .exceptions import ConfigError, FatalInputError, GedcomError

__all__ = ["ConfigError", "FatalInputError", "GedcomError"]
