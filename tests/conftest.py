# Rev 0.1.0

"""Pytest fixtures for springtracker (Rev 0.1.0)"""
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

from springtracker.models.db import DB
from springtracker.models.store import IssueStore
from springtracker.repositories.sqlite_store_repository import SQLiteStoreRepository

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    return T0 + timedelta(minutes=minutes)


@pytest.fixture(scope="session", autouse=True)
def qt_core():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def store() -> IssueStore:
    return IssueStore()


@pytest.fixture()
def db(tmp_path: Path):
    handle = DB(tmp_path / "test.db")
    try:
        yield handle
    finally:
        handle.close()


@pytest.fixture()
def repo(db) -> SQLiteStoreRepository:
    r = SQLiteStoreRepository(db)
    r.ensure_schema()
    return r
