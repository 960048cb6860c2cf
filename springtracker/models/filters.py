# Rev 0.1.0
"""Filter value type: built-in smart filters plus one filter per tag."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from .entities import Tag, utc_now

DISTANT_PAST = datetime(1, 1, 1, tzinfo=timezone.utc)
RECENT_DAYS = 7

ALL_ID = "all"
RECENT_ID = "recent"


@dataclass(frozen=True)
class Filter:
    """Equality and hashing go through ``id`` only."""
    id: str
    name: str = field(compare=False)
    icon: str = field(compare=False)
    min_modification_date: datetime = field(default=DISTANT_PAST, compare=False)
    tag: Optional[Tag] = field(default=None, compare=False)

    @property
    def is_smart(self) -> bool:
        return self.tag is None


ALL = Filter(id=ALL_ID, name="All Issues", icon="tray")


def recent_filter(days: int = RECENT_DAYS, now: Optional[datetime] = None) -> Filter:
    cutoff = (now or utc_now()) - timedelta(days=days)
    return Filter(id=RECENT_ID, name="Recent Issues", icon="clock", min_modification_date=cutoff)


def tag_filter(tag: Tag) -> Filter:
    return Filter(id=str(tag.id), name=tag.name, icon="tag", tag=tag)
