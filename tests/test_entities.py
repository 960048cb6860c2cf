# tests/test_entities.py
from __future__ import annotations

from datetime import timezone

import pytest

from springtracker.models.entities import Issue, Priority, Tag

from conftest import T0, at


def test_issue_defaults():
    issue = Issue()
    assert issue.title == ""
    assert issue.content == ""
    assert issue.completed is False
    assert issue.priority is Priority.MEDIUM
    assert issue.status == "Open"
    assert issue.creation_date.tzinfo is timezone.utc


def test_issue_status_and_formatted_date():
    issue = Issue(title="x", completed=True, creation_date=T0)
    assert issue.status == "Closed"
    assert issue.formatted_creation_date == "1/1/2024"


def test_unknown_priority_rejected():
    with pytest.raises(ValueError):
        Issue(priority=7)


def test_issue_order_is_lowercase_title_then_creation_date():
    later = Issue(title="Same", creation_date=at(5))
    earlier = Issue(title="same", creation_date=at(1))
    first = Issue(title="alpha", creation_date=at(9))
    assert sorted([later, earlier, first]) == [first, earlier, later]


def test_tag_order_is_lowercase_name_then_id():
    b = Tag(id="b", name="ui")
    a = Tag(id="a", name="UI")
    z = Tag(id="z", name="Backend")
    assert sorted([b, a, z]) == [z, a, b]


def test_issue_from_record_fills_defaults():
    issue = Issue.from_record({"id": "i1", "title": None, "content": None, "priority": None, "completed": None})
    assert issue.id == "i1"
    assert issue.title == ""
    assert issue.content == ""
    assert issue.priority is Priority.MEDIUM
    assert issue.completed is False
    assert issue.modification_date.tzinfo is not None


def test_issue_record_round_trip_keeps_dates():
    issue = Issue(title="t", creation_date=T0, modification_date=at(3), priority=Priority.HIGH, completed=True)
    back = Issue.from_record(issue.to_record())
    assert (back.id, back.title, back.priority, back.completed) == (issue.id, "t", Priority.HIGH, True)
    assert back.creation_date == T0
    assert back.modification_date == at(3)


def test_naive_timestamps_are_read_as_utc():
    issue = Issue.from_record({"creation_date": "2024-01-01T12:00:00"})
    assert issue.creation_date == T0


def test_tag_from_record_defaults_name():
    tag = Tag.from_record({"id": "t1", "name": None})
    assert (tag.id, tag.name) == ("t1", "")


def test_constructor_defaults_missing_fields():
    issue = Issue(title=None, content=None, priority=None, completed=None)
    assert (issue.title, issue.content, issue.priority, issue.completed) == ("", "", Priority.MEDIUM, False)
    assert Tag(name=None).name == ""


def test_constructor_reads_naive_dates_as_utc():
    naive = T0.replace(tzinfo=None)
    issue = Issue(title="x", creation_date=naive, modification_date=naive)
    assert issue.creation_date == T0
    assert issue.modification_date == T0
    issue.touch(naive)
    assert issue.modification_date.tzinfo is not None


def test_constructor_defaults_missing_dates():
    issue = Issue(creation_date=None, modification_date=None)
    assert issue.creation_date.tzinfo is timezone.utc
    assert issue.modification_date.tzinfo is timezone.utc
