# Rev 0.1.0
"""Bundled resource loading.

A bundled file that is missing or malformed is a packaging error, so every
failure surfaces as ResourceDecodeError naming the file and what went wrong.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from .paths import RESOURCES_DIR

T = TypeVar("T")


class ResourceDecodeError(RuntimeError):
    pass


def decode(file: str, build: Callable[[Any], T], directory: Optional[Path] = None) -> T:
    path = Path(file) if Path(file).is_absolute() else (directory or RESOURCES_DIR) / file
    if not path.exists():
        raise ResourceDecodeError(f"Failed to locate {file} in bundle.")
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ResourceDecodeError(f"Failed to load {file} from bundle.") from exc
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ResourceDecodeError(f"Failed to decode {file} from bundle because it appears to be invalid JSON") from exc
    try:
        return build(data)
    except KeyError as exc:
        raise ResourceDecodeError(f"Failed to decode {file} from bundle due to missing key '{exc.args[0]}'") from exc
    except (TypeError, ValueError) as exc:
        raise ResourceDecodeError(f"Failed to decode {file} from bundle due to type mismatch – {exc}") from exc
