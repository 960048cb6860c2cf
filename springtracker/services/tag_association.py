# Rev 0.1.0

"""Tag association service (Rev 0.1.0)
Attached vs. missing tags for an issue, and idempotent attach/detach.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from ..models.entities import Issue, Tag
from ..models.store import IssueStore

NO_TAGS = "No tags"


def join_names(names: List[str]) -> str:
    """English list: "A", "A and B", "A, B, and C"."""
    if len(names) <= 1:
        return "".join(names)
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{', '.join(names[:-1])}, and {names[-1]}"


class TagAssociation:
    def __init__(self, store: IssueStore):
        self._store = store

    def tags_of(self, issue: Issue) -> List[Tag]:
        tags = (self._store.get_tag(t) for t in self._store.tag_ids_for(issue.id))
        return sorted(t for t in tags if t is not None)

    def missing_tags(self, issue: Issue, all_tags: Optional[Iterable[Tag]] = None) -> List[Tag]:
        all_tags = self._store.tags() if all_tags is None else all_tags
        attached = self._store.tag_ids_for(issue.id)
        return sorted(t for t in all_tags if t.id not in attached)

    def format_tag_list(self, issue: Issue) -> str:
        tags = self.tags_of(issue)
        if not tags:
            return NO_TAGS
        return join_names([t.name for t in tags])

    def attach(self, tag: Tag, issue: Issue) -> bool:
        return self._store.attach(tag, issue)

    def detach(self, tag: Tag, issue: Issue) -> bool:
        return self._store.detach(tag, issue)
