# tests/test_store.py
from __future__ import annotations

import random

from springtracker.models.entities import Priority

from conftest import T0


def test_mutations_emit_changed(store):
    events = []
    store.changed.connect(lambda: events.append("changed"))
    issue = store.new_issue(title="x")
    tag = store.new_tag("t")
    store.attach(tag, issue)
    assert events == ["changed"] * 3


def test_noop_mutations_emit_nothing(store):
    issue = store.new_issue(title="x")
    tag = store.new_tag("t")
    store.attach(tag, issue)
    events = []
    store.changed.connect(lambda: events.append("changed"))
    assert store.attach(tag, issue) is False
    assert store.update_issue(issue, title="x") is False
    assert store.rename_tag(tag, "t") is False
    assert events == []


def test_issue_changed_carries_id(store):
    seen = []
    store.issueChanged.connect(seen.append)
    issue = store.new_issue(title="x")
    store.update_issue(issue, content="body")
    assert seen == [issue.id, issue.id]


def test_update_touches_modification_date(store):
    issue = store.new_issue(title="x", modification_date=T0)
    assert store.update_issue(issue, title="y", priority=2) is True
    assert issue.title == "y"
    assert issue.priority is Priority.HIGH
    assert issue.modification_date > T0


def test_deleted_issue_refuses_edits(store):
    issue = store.new_issue(title="x")
    assert store.delete(issue) is True
    assert issue.is_deleted is True
    assert store.update_issue(issue, title="y") is False
    assert store.toggle_completed(issue) is False
    assert issue.title == "x"
    assert store.delete(issue) is False


def test_delete_all_merges_back(store):
    tag = store.new_tag("t")
    issue = store.new_issue(title="x")
    store.attach(tag, issue)
    events = []
    store.changed.connect(lambda: events.append(1))

    deleted = store.delete_all()
    assert set(deleted) == {tag.id, issue.id}
    assert store.issues() == []
    assert store.tags() == []
    assert issue.is_deleted is True
    assert store.issue_ids_for(tag.id) == set()
    assert events == [1]


def test_delete_all_on_empty_store(store):
    assert store.delete_all() == []


def test_sample_data_links_issues_to_their_tag(store):
    store.create_sample_data(3, 4, rng=random.Random(1))
    assert len(store.tags()) == 3
    assert len(store.issues()) == 12
    for tag in store.tags():
        titles = {store.get_issue(i).title for i in store.issue_ids_for(tag.id)}
        n = tag.name.removeprefix("Tag")
        assert titles == {f"Issue{n}-{j}" for j in range(1, 5)}


def test_has_changes_tracks_saves(store):
    assert store.has_changes is False
    store.new_tag("t")
    assert store.has_changes is True
    store.mark_saved()
    assert store.has_changes is False


def test_delete_all_flags_tags(store):
    tag = store.new_tag("t")
    store.delete_all()
    assert tag.is_deleted is True


def test_new_tag_without_name_sorts(store):
    store.new_tag(None)
    store.new_tag("b")
    assert [t.name for t in sorted(store.tags())] == ["", "b"]
