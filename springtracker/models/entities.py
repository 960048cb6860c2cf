# Rev 0.1.0
"""Issue and Tag entities.

Records coming from storage may miss any field; ``from_record`` fills the
gaps with the documented defaults so consumers never null-check:

    title/content/name -> ""
    creation/modification date -> now (UTC)
    completed -> False, priority -> Medium
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from .types import IssueStatus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


def parse_ts(value: Any) -> Optional[datetime]:
    """Accept datetimes or ISO strings; naive values are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        ts = value
    else:
        try:
            ts = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return None
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


class Priority(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2


@dataclass(eq=False)
class Issue:
    id: str = field(default_factory=new_id)
    title: str = ""
    content: str = ""
    creation_date: datetime = field(default_factory=utc_now)
    modification_date: datetime = field(default_factory=utc_now)
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    is_deleted: bool = False

    def __post_init__(self):
        self.title = self.title or ""
        self.content = self.content or ""
        self.creation_date = parse_ts(self.creation_date) or utc_now()
        self.modification_date = parse_ts(self.modification_date) or utc_now()
        self.completed = bool(self.completed)
        # raises ValueError on anything outside Low/Medium/High
        self.priority = Priority.MEDIUM if self.priority is None else Priority(self.priority)

    @property
    def status(self) -> IssueStatus:
        return "Closed" if self.completed else "Open"

    @property
    def formatted_creation_date(self) -> str:
        d = self.creation_date
        return f"{d.month}/{d.day}/{d.year}"

    def sort_key(self) -> tuple[str, datetime]:
        return (self.title.lower(), self.creation_date)

    def __lt__(self, other: "Issue") -> bool:
        return self.sort_key() < other.sort_key()

    def touch(self, when: Optional[datetime] = None) -> None:
        self.modification_date = parse_ts(when) or utc_now()

    @classmethod
    def from_record(cls, rec: Mapping[str, Any]) -> "Issue":
        priority = rec.get("priority")
        return cls(
            id=str(rec.get("id") or new_id()),
            title=rec.get("title") or "",
            content=rec.get("content") or "",
            creation_date=parse_ts(rec.get("creation_date")) or utc_now(),
            modification_date=parse_ts(rec.get("modification_date")) or utc_now(),
            completed=bool(rec.get("completed") or False),
            priority=Priority.MEDIUM if priority is None else int(priority),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "creation_date": self.creation_date.isoformat(),
            "modification_date": self.modification_date.isoformat(),
            "completed": int(self.completed),
            "priority": int(self.priority),
        }


@dataclass(eq=False)
class Tag:
    id: str = field(default_factory=new_id)
    name: str = ""
    is_deleted: bool = False

    def __post_init__(self):
        self.name = self.name or ""

    # Names need not be unique; the id keeps the order stable.
    def sort_key(self) -> tuple[str, str]:
        return (self.name.lower(), str(self.id))

    def __lt__(self, other: "Tag") -> bool:
        return self.sort_key() < other.sort_key()

    @classmethod
    def from_record(cls, rec: Mapping[str, Any]) -> "Tag":
        return cls(id=str(rec.get("id") or new_id()), name=rec.get("name") or "")

    def to_record(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}
