# Rev 0.1.0
# springtracker – SQLiteStoreRepository (Rev 0.1.0)
from __future__ import annotations
import sqlite3
from typing import Any, Dict, List, Union

from ..models.entities import Issue, Tag
from ..models.store import IssueStore
from ..utils.logging_setup import get_logger

SCHEMA = """
CREATE TABLE IF NOT EXISTS issues (
    id                TEXT PRIMARY KEY,
    title             TEXT,
    content           TEXT,
    creation_date     TEXT,
    modification_date TEXT,
    completed         INTEGER NOT NULL DEFAULT 0,
    priority          INTEGER
);
CREATE TABLE IF NOT EXISTS tags (
    id   TEXT PRIMARY KEY,
    name TEXT
);
CREATE TABLE IF NOT EXISTS issue_tags (
    tag_id   TEXT NOT NULL REFERENCES tags(id) ON DELETE CASCADE,
    issue_id TEXT NOT NULL REFERENCES issues(id) ON DELETE CASCADE,
    PRIMARY KEY (tag_id, issue_id)
);
"""


class SQLiteStoreRepository:
    """
    Snapshot persistence for an IssueStore.
    save() rewrites all three tables in one transaction; load() replaces the
    store's contents. NULL columns become the entity defaults on load.
    """

    def __init__(self, db_or_conn: Union[sqlite3.Connection, Any]):
        self._db_or_conn = db_or_conn
        self._log = get_logger("SQLiteStoreRepository")

    # --------------- connection helpers ---------------
    def _conn(self) -> sqlite3.Connection:
        if isinstance(self._db_or_conn, sqlite3.Connection):
            return self._db_or_conn
        if hasattr(self._db_or_conn, "conn") and isinstance(self._db_or_conn.conn, sqlite3.Connection):
            return self._db_or_conn.conn
        raise RuntimeError("SQLiteStoreRepository: unable to obtain sqlite3.Connection (.conn expected).")

    def _fetch_all(self, sql: str, params: tuple = ()) -> List[Dict[str, Any]]:
        cur = self._conn().execute(sql, params)
        cols = [d[0] for d in cur.description]
        return [{cols[i]: row[i] for i in range(len(cols))} for row in cur.fetchall()]

    # --------------- public API ---------------
    def ensure_schema(self) -> None:
        self._conn().executescript(SCHEMA)

    def save(self, store: IssueStore, *, force: bool = False) -> bool:
        if not (force or store.has_changes):
            return False
        con = self._conn()
        issues = [i.to_record() for i in store.issues()]
        tags = [t.to_record() for t in store.tags()]
        try:
            con.execute("DELETE FROM issue_tags")
            con.execute("DELETE FROM issues")
            con.execute("DELETE FROM tags")
            con.executemany(
                """
                INSERT INTO issues(id, title, content, creation_date, modification_date, completed, priority)
                VALUES (:id, :title, :content, :creation_date, :modification_date, :completed, :priority)
                """,
                issues,
            )
            con.executemany("INSERT INTO tags(id, name) VALUES (:id, :name)", tags)
            con.executemany("INSERT INTO issue_tags(tag_id, issue_id) VALUES (?, ?)", store.links())
        except sqlite3.Error:
            con.rollback()
            raise
        con.commit()
        store.mark_saved()
        self._log.info("saved %d issues, %d tags", len(issues), len(tags))
        return True

    def load(self, store: IssueStore) -> None:
        issues = [Issue.from_record(r) for r in self._fetch_all("SELECT * FROM issues")]
        tags = [Tag.from_record(r) for r in self._fetch_all("SELECT * FROM tags")]
        links = [(r["tag_id"], r["issue_id"]) for r in self._fetch_all("SELECT tag_id, issue_id FROM issue_tags")]
        store.replace_contents(issues, tags, links)
        self._log.info("loaded %d issues, %d tags", len(issues), len(tags))
