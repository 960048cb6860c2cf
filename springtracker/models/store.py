# Rev 0.1.0
"""In-memory object store for issues and tags.

The tag/issue relationship is kept as two explicit indexes
(tag id -> issue ids, issue id -> tag ids) that only attach/detach and
delete touch. Every mutation that changes something emits ``changed``
once it is complete; consumers re-run their queries from there.
"""
from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Set, Union

from PySide6.QtCore import QObject, Signal

from .entities import Issue, Priority, Tag, utc_now
from ..utils.logging_setup import get_logger


class IssueStore(QObject):
    changed = Signal()
    issueChanged = Signal(str)

    def __init__(self):
        super().__init__()
        self._log = get_logger("IssueStore")
        self._issues: Dict[str, Issue] = {}
        self._tags: Dict[str, Tag] = {}
        self._tag_issues: Dict[str, Set[str]] = {}
        self._issue_tags: Dict[str, Set[str]] = {}
        self._dirty = False

    # ---- snapshot reads
    def issues(self) -> List[Issue]:
        return list(self._issues.values())

    def tags(self) -> List[Tag]:
        return list(self._tags.values())

    def get_issue(self, issue_id: str) -> Optional[Issue]:
        return self._issues.get(issue_id)

    def get_tag(self, tag_id: str) -> Optional[Tag]:
        return self._tags.get(tag_id)

    def tag_ids_for(self, issue_id: str) -> Set[str]:
        return set(self._issue_tags.get(issue_id, ()))

    def issue_ids_for(self, tag_id: str) -> Set[str]:
        return set(self._tag_issues.get(tag_id, ()))

    def links(self) -> List[tuple[str, str]]:
        return [(t, i) for t, ids in self._tag_issues.items() for i in sorted(ids)]

    @property
    def has_changes(self) -> bool:
        return self._dirty

    def mark_saved(self) -> None:
        self._dirty = False

    # ---- creation
    def new_issue(self, **fields) -> Issue:
        issue = Issue(**fields)
        self._issues[issue.id] = issue
        self._issue_tags.setdefault(issue.id, set())
        self._notify(issue.id)
        return issue

    def new_tag(self, name: str = "", tag_id: Optional[str] = None) -> Tag:
        tag = Tag(name=name) if tag_id is None else Tag(id=tag_id, name=name)
        self._tags[tag.id] = tag
        self._tag_issues.setdefault(tag.id, set())
        self._notify()
        return tag

    # ---- field edits
    def update_issue(
        self,
        issue: Issue,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        priority: Optional[int] = None,
        completed: Optional[bool] = None,
    ) -> bool:
        if not self._editable(issue):
            return False

        changes = {}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content
        if priority is not None:
            changes["priority"] = Priority(priority)
        if completed is not None:
            changes["completed"] = bool(completed)

        changes = {k: v for k, v in changes.items() if getattr(issue, k) != v}
        if not changes:
            return False
        for key, value in changes.items():
            setattr(issue, key, value)
        issue.touch()
        self._notify(issue.id)
        return True

    def toggle_completed(self, issue: Issue) -> bool:
        return self.update_issue(issue, completed=not issue.completed)

    def rename_tag(self, tag: Tag, name: str) -> bool:
        if tag.id not in self._tags:
            self._log.warning("rename of unknown tag %s ignored", tag.id)
            return False
        if tag.name == name:
            return False
        tag.name = name
        self._notify()
        return True

    # ---- relationship
    def attach(self, tag: Tag, issue: Issue) -> bool:
        if not self._editable(issue) or tag.id not in self._tags:
            return False
        ids = self._issue_tags.setdefault(issue.id, set())
        if tag.id in ids:
            return False
        ids.add(tag.id)
        self._tag_issues.setdefault(tag.id, set()).add(issue.id)
        issue.touch()
        self._notify(issue.id)
        return True

    def detach(self, tag: Tag, issue: Issue) -> bool:
        if not self._editable(issue):
            return False
        ids = self._issue_tags.get(issue.id, set())
        if tag.id not in ids:
            return False
        ids.discard(tag.id)
        self._tag_issues.get(tag.id, set()).discard(issue.id)
        issue.touch()
        self._notify(issue.id)
        return True

    # ---- deletion
    def delete(self, obj: Union[Issue, Tag]) -> bool:
        if isinstance(obj, Issue):
            removed = self._drop_issue(obj.id)
        else:
            removed = self._drop_tag(obj.id)
        if not removed:
            return False
        self._notify(obj.id if isinstance(obj, Issue) else None)
        return True

    def delete_all(self) -> List[str]:
        """Batch delete every tag then every issue; returns the deleted ids."""
        deleted = list(self._tags) + list(self._issues)
        self._merge_deleted(deleted)
        if deleted:
            self._log.info("batch delete removed %d objects", len(deleted))
            self._notify()
        return deleted

    def _merge_deleted(self, ids: Iterable[str]) -> None:
        for obj_id in ids:
            if obj_id in self._tags:
                self._drop_tag(obj_id)
            elif obj_id in self._issues:
                self._drop_issue(obj_id)

    def _drop_issue(self, issue_id: str) -> bool:
        issue = self._issues.pop(issue_id, None)
        if issue is None:
            return False
        issue.is_deleted = True
        for tag_id in self._issue_tags.pop(issue_id, set()):
            self._tag_issues.get(tag_id, set()).discard(issue_id)
        return True

    def _drop_tag(self, tag_id: str) -> bool:
        tag = self._tags.pop(tag_id, None)
        if tag is None:
            return False
        tag.is_deleted = True
        for issue_id in self._tag_issues.pop(tag_id, set()):
            self._issue_tags.get(issue_id, set()).discard(tag_id)
        return True

    # ---- loading (used by repositories; no per-object events)
    def replace_contents(self, issues: Iterable[Issue], tags: Iterable[Tag], links: Iterable[tuple[str, str]]) -> None:
        self._issues = {i.id: i for i in issues}
        self._tags = {t.id: t for t in tags}
        self._issue_tags = {i: set() for i in self._issues}
        self._tag_issues = {t: set() for t in self._tags}
        for tag_id, issue_id in links:
            if tag_id in self._tags and issue_id in self._issues:
                self._tag_issues[tag_id].add(issue_id)
                self._issue_tags[issue_id].add(tag_id)
        self._dirty = False
        self.changed.emit()

    # ---- sample data
    def create_sample_data(self, tag_count: int = 5, issues_per_tag: int = 10, rng: Optional[random.Random] = None) -> None:
        rng = rng or random.Random()
        now = utc_now()
        for i in range(1, tag_count + 1):
            tag = Tag(name=f"Tag{i}")
            self._tags[tag.id] = tag
            self._tag_issues[tag.id] = set()
            for j in range(1, issues_per_tag + 1):
                issue = Issue(
                    title=f"Issue{i}-{j}",
                    content="Description goes here",
                    creation_date=now,
                    modification_date=now,
                    completed=rng.random() < 0.5,
                    priority=rng.randint(0, 2),
                )
                self._issues[issue.id] = issue
                self._issue_tags[issue.id] = {tag.id}
                self._tag_issues[tag.id].add(issue.id)
        self._log.info("sample data: %d tags, %d issues", tag_count, tag_count * issues_per_tag)
        self._notify()

    # ---- internals
    def _editable(self, issue: Issue) -> bool:
        if issue.is_deleted or issue.id not in self._issues:
            self._log.warning("edit refused for deleted or unknown issue %s", issue.id)
            return False
        return True

    def _notify(self, issue_id: Optional[str] = None) -> None:
        self._dirty = True
        if issue_id is not None:
            self.issueChanged.emit(issue_id)
        self.changed.emit()
