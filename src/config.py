"""Configuration file loading.

Settings are read from YAML (or JSON, by extension) and passed to the
commands that use them. Lookup order: explicit path, ``PROJMGR_CONFIG``, then the
default locations in ``Constants.DEFAULT_CONFIG_PATHS``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when an explicitly requested config file cannot be used."""


_TRUE_STRINGS = ("true", "yes", "on", "1")
_FALSE_STRINGS = ("false", "no", "off", "0", "")


def _as_bool(data: Dict[str, Any], key: str) -> bool:
    """Read a boolean switch; strings must spell out true or false."""
    value = data.get(key, False)
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ConfigError(f"Config key {key} must be a boolean, got {value!r}")


@dataclass
class Settings:
    """Recognised configuration keys."""

    compiler_root: Optional[str] = None
    legacy_intersection: bool = False
    strict_variants: bool = False
    log_level: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        root = data.get("compiler_root")
        level = data.get("log_level")
        return cls(
            compiler_root=str(root) if root else None,
            legacy_intersection=_as_bool(data, "legacy_intersection"),
            strict_variants=_as_bool(data, "strict_variants"),
            log_level=str(level).upper() if level else None,
        )


def _read(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        if path.lower().endswith(".json"):
            data = json.load(fh)
        else:
            data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _default_path() -> Optional[str]:
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path:
        return env_path
    for candidate in Constants.DEFAULT_CONFIG_PATHS:
        expanded = os.path.expanduser(candidate)
        if os.path.isfile(expanded):
            return expanded
    return None


def load_config(path: Optional[str] = None) -> Settings:
    """Load settings from ``path`` or the default locations.

    An explicit ``path`` that is missing or malformed raises ``ConfigError``.
    Problems with implicitly found files are logged and defaults are used.
    """
    explicit = bool(path)
    path = path or _default_path()
    if not path:
        return Settings()
    try:
        settings = Settings.from_dict(_read(path))
    except (OSError, ValueError, yaml.YAMLError, ConfigError) as exc:
        if explicit:
            raise ConfigError(f"Failed to load config {path}: {exc}") from exc
        logger.warning("Ignoring config %s: %s", path, exc)
        return Settings()
    logger.debug("Loaded config from %s", path)
    return settings

