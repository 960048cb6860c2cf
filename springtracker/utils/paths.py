# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Uses XDG Base Directory spec
- Logs/state live under XDG_STATE_HOME, settings under XDG_CONFIG_HOME
- The default database lives under XDG_DATA_HOME
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "springtracker"


def _xdg(var: str, fallback: Path) -> Path:
    return Path(os.environ.get(var, fallback)).expanduser()


def data_dir() -> Path:
    return _xdg("XDG_DATA_HOME", Path.home() / ".local" / "share") / APP_NAME


def state_dir() -> Path:
    return _xdg("XDG_STATE_HOME", Path.home() / ".local" / "state") / APP_NAME


def logs_dir() -> Path:
    return state_dir() / "logs"


def config_dir() -> Path:
    return _xdg("XDG_CONFIG_HOME", Path.home() / ".config") / APP_NAME


# Bundled resources (award catalog) ship inside the package
RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"


def default_db_path() -> Path:
    return data_dir() / "springtracker.db"


def ensure_dirs() -> None:
    for p in (data_dir(), state_dir(), logs_dir(), config_dir()):
        p.mkdir(parents=True, exist_ok=True)
