# springtracker/utils/config.py
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .paths import config_dir, default_db_path

SETTINGS_NAME = "settings.json"

_DEFAULTS: Dict[str, Any] = {
    "filters": {
        "recent_days": 7,
    },
    "store": {
        "db_path": None,      # None → XDG data dir
    },
    "awards": {
        "catalog": None,      # None → bundled awards.json
    },
}


def settings_file() -> Path:
    return config_dir() / SETTINGS_NAME


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if path.exists():
        try:
            return _merge(_DEFAULTS, json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError):
            return copy.deepcopy(_DEFAULTS)
    return copy.deepcopy(_DEFAULTS)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def resolve_db_path(settings: Dict[str, Any]) -> Path:
    """Env SPRINGTRACKER_DB wins, then settings, then the XDG default."""
    env = os.environ.get("SPRINGTRACKER_DB")
    if env:
        return Path(env).expanduser()
    configured = settings.get("store", {}).get("db_path")
    return Path(configured).expanduser() if configured else default_db_path()


def recent_days(settings: Dict[str, Any]) -> int:
    return int(settings.get("filters", {}).get("recent_days", 7))
