# pwdg/config.py
"""
Saved generation defaults for pwdg.
Settings are JSON in %APPDATA%/pwdg/config.json (Windows) or ~/.pwdg/config.json (fallback).
PWDG_CONFIG overrides the location. Generated passwords are never written here.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .generator import Configuration, MIN_LENGTH, configuration

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": MIN_LENGTH,
    "min_upper": 0,
    "min_lower": 0,
    "min_digit": 0,
    "min_special": 0,
    "exclude": "",
}

OPTION_KEYS = tuple(DEFAULTS)


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "pwdg")
    return os.path.join(os.path.expanduser("~"), ".pwdg")


def config_path() -> str:
    override = os.getenv("PWDG_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, unknown keys dropped
    out = DEFAULTS.copy()
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    data = {k: cfg.get(k, DEFAULTS[k]) for k in OPTION_KEYS}
    with open(p, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.debug("Saved defaults to %s", p)
    return p


def resolve_configuration(
    settings: Dict[str, Any],
    overrides: Optional[Dict[str, Any]] = None,
    strong: bool = False,
) -> Configuration:
    """
    Merge saved settings with explicit overrides (None means "not given")
    and apply the strong flag last, so it beats any minimum.
    """
    merged = DEFAULTS.copy()
    merged.update({k: v for k, v in settings.items() if k in DEFAULTS})
    for k, v in (overrides or {}).items():
        if k in DEFAULTS and v is not None:
            merged[k] = v
    return configuration(strong=strong, **merged)
