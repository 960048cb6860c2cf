# Rev 0.1.0
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

_REQUIRED = ("name", "description", "color", "criterion", "value", "image")


@dataclass(frozen=True)
class Award:
    name: str
    description: str
    color: str
    criterion: str
    value: int
    image: str

    @classmethod
    def from_record(cls, rec: Mapping[str, Any]) -> "Award":
        missing = [k for k in _REQUIRED if k not in rec]
        if missing:
            raise KeyError(missing[0])
        if not isinstance(rec["value"], int) or isinstance(rec["value"], bool):
            raise TypeError(f"value for {rec['name']!r} must be an integer")
        return cls(**{k: rec[k] for k in _REQUIRED})