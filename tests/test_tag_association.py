# tests/test_tag_association.py
from __future__ import annotations

import pytest

from springtracker.services.tag_association import NO_TAGS, TagAssociation, join_names


@pytest.fixture()
def assoc(store) -> TagAssociation:
    return TagAssociation(store)


@pytest.fixture()
def tags(store):
    return [store.new_tag(n) for n in ("ui", "Backend", "Docs", "api")]


def test_tags_of_is_sorted(store, assoc, tags):
    issue = store.new_issue(title="x")
    for t in tags:
        assoc.attach(t, issue)
    assert [t.name for t in assoc.tags_of(issue)] == ["api", "Backend", "Docs", "ui"]


def test_tags_of_defaults_to_empty(store, assoc):
    assert assoc.tags_of(store.new_issue()) == []


def test_missing_and_attached_partition_all_tags(store, assoc, tags):
    issue = store.new_issue(title="x")
    assoc.attach(tags[0], issue)
    assoc.attach(tags[2], issue)

    attached = assoc.tags_of(issue)
    missing = assoc.missing_tags(issue, tags)
    assert {t.id for t in attached} | {t.id for t in missing} == {t.id for t in tags}
    assert not ({t.id for t in attached} & {t.id for t in missing})
    assert [t.name for t in missing] == ["api", "Backend"]


def test_missing_tags_defaults_to_store_tags(store, assoc, tags):
    issue = store.new_issue()
    assert [t.name for t in assoc.missing_tags(issue)] == ["api", "Backend", "Docs", "ui"]


def test_attach_is_idempotent(store, assoc, tags):
    issue = store.new_issue()
    assert assoc.attach(tags[0], issue) is True
    once = [t.id for t in assoc.tags_of(issue)]
    assert assoc.attach(tags[0], issue) is False
    assert [t.id for t in assoc.tags_of(issue)] == once


def test_detach_is_idempotent(store, assoc, tags):
    issue = store.new_issue()
    assoc.attach(tags[0], issue)
    assert assoc.detach(tags[0], issue) is True
    assert assoc.detach(tags[0], issue) is False
    assert assoc.detach(tags[1], issue) is False
    assert assoc.tags_of(issue) == []


def test_format_tag_list(store, assoc):
    issue = store.new_issue()
    assert assoc.format_tag_list(issue) == NO_TAGS
    ui = store.new_tag("UI")
    assoc.attach(ui, issue)
    assert "UI" in assoc.format_tag_list(issue)


@pytest.mark.parametrize(
    "names,expected",
    [
        (["A"], "A"),
        (["A", "B"], "A and B"),
        (["A", "B", "C"], "A, B, and C"),
    ],
)
def test_join_names(names, expected):
    assert join_names(names) == expected


def test_deleted_issue_refuses_attach(store, assoc, tags):
    issue = store.new_issue()
    store.delete(issue)
    assert assoc.attach(tags[0], issue) is False
    assert store.issue_ids_for(tags[0].id) == set()


def test_deleting_a_tag_unlinks_it(store, assoc, tags):
    issue = store.new_issue()
    assoc.attach(tags[0], issue)
    store.delete(tags[0])
    assert assoc.tags_of(issue) == []
    assert assoc.format_tag_list(issue) == NO_TAGS
