# springtracker DB adapter
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import sqlite3
from ..utils.logging_setup import get_logger

@dataclass
class DB:
    """Lightweight SQLite wrapper with sane pragmas."""
    path: Path

    def __post_init__(self):
        self._log = get_logger("DB")
        if str(self.path) != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(self.path))
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.execute("PRAGMA foreign_keys=ON;")
        self._log.info("SQLite open %s", self.path)

    def execute(self, *a, **k):
        return self.conn.execute(*a, **k)

    def commit(self):
        return self.conn.commit()

    def close(self) -> None:
        self.conn.close()
