"""
YAML-backed configuration for gedcom_records.

The project ships ``config/gedcom_records.yml``. When the file is absent
(e.g. the package is installed without the repository checkout) the
built-in defaults below are used.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from gedcom_records.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_records.yml"

DEFAULTS: Dict[str, Any] = {
    "paths": {"logs_dir": "logs"},
    "parser": {"report_unknown_tags": True},
    "writer": {"max_line_length": 255, "line_terminator": "\n"},
    "logging": {
        "level": "INFO",
        "console_level": "WARNING",
        "to_file": False,
        "dir": None,
        "file": "gedcom_records.log",
        "rotate": False,
    },
    "debug": False,
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


class GPConfig:
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        data = _merge(DEFAULTS, data or {})
        self.paths = data["paths"]
        self.parser = data["parser"]
        self.writer = data["writer"]
        self.logging = data["logging"]
        self.debug = bool(data["debug"])

    @property
    def report_unknown_tags(self) -> bool:
        return bool(self.parser.get("report_unknown_tags", True))

    @property
    def max_line_length(self) -> Optional[int]:
        value = self.writer.get("max_line_length")
        return int(value) if value else None

    @property
    def line_terminator(self) -> str:
        return self.writer.get("line_terminator") or "\n"


def load_config(path: Optional[Union[str, Path]] = None) -> GPConfig:
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return GPConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    return GPConfig(data)


_config_cache: Optional[GPConfig] = None


def get_config() -> GPConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
