# Rev 0.1.0

"""Issue query service (Rev 0.1.0)
Resolve a Filter against the store's issues and count active issues per tag.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from ..models.entities import Issue
from ..models.filters import Filter
from ..models.store import IssueStore


class IssueQuery:
    def __init__(self, store: IssueStore):
        self._store = store

    def select(self, flt: Filter, all_issues: Optional[Iterable[Issue]] = None) -> List[Issue]:
        issues = self._store.issues() if all_issues is None else list(all_issues)
        if flt.tag is not None:
            # a tag the store no longer knows has no issues
            ids = self._store.issue_ids_for(flt.tag.id)
            matched = [i for i in issues if i.id in ids]
        else:
            matched = [i for i in issues if i.modification_date >= flt.min_modification_date]
        return sorted((i for i in matched if not i.is_deleted), key=Issue.sort_key)

    def active_issue_count(self, flt: Filter) -> int:
        """Open issues under a tag filter; smart filters carry no badge (0)."""
        if flt.tag is None:
            return 0
        count = 0
        for issue_id in self._store.issue_ids_for(flt.tag.id):
            issue = self._store.get_issue(issue_id)
            if issue is not None and not issue.completed:
                count += 1
        return count
