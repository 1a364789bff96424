"""YAML-based configuration for release-picker.

The config lives at ``~/.config/release-picker/config.yaml`` (honouring
``XDG_CONFIG_HOME``) and is merged over DEFAULT_CONFIG, so a partial file
only needs the keys it changes.
"""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

import yaml

from .themes import Theme

logger = logging.getLogger(__name__)

VERBOSITY_ENV = "RELEASE_PICKER_VERBOSITY"
MAX_VERBOSITY = 2

# Default config
DEFAULT_CONFIG: dict[str, Any] = {
    "verbosity": 0,
    "theme": asdict(Theme()),
}


def get_config_dir() -> Path:
    """Get the release-picker config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "release-picker"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Load config.yaml merged over the defaults."""
    config_path = get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if data is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)
    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def save_config(cfg: dict[str, Any]) -> None:
    """Save the config."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(cfg, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def clamp_verbosity(value: int) -> int:
    return max(0, min(MAX_VERBOSITY, value))


def get_verbosity(cfg: dict[str, Any] | None = None) -> int:
    """Default verbosity: $RELEASE_PICKER_VERBOSITY, then the config file."""
    raw = (os.environ.get(VERBOSITY_ENV) or "").strip()
    if raw:
        try:
            return clamp_verbosity(int(raw))
        except ValueError:
            logger.warning("Ignoring invalid %s=%r", VERBOSITY_ENV, raw)

    if cfg is None:
        cfg = load_config()
    try:
        return clamp_verbosity(int(cfg.get("verbosity", 0)))
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid verbosity in config: %r", cfg.get("verbosity"))
        return 0


def theme_from_config(cfg: dict[str, Any] | None = None) -> Theme:
    """Build a Theme from the ``theme`` section, ignoring unknown keys."""
    if cfg is None:
        cfg = load_config()
    section = cfg.get("theme") or {}
    if not isinstance(section, dict):
        logger.warning("Ignoring theme config: expected a mapping")
        return Theme()
    known = {f.name for f in fields(Theme)}
    unknown = sorted(set(section) - known)
    if unknown:
        logger.warning("Unknown theme keys ignored: %s", ", ".join(unknown))
    return Theme(**{key: str(value) for key, value in section.items() if key in known and value is not None})
