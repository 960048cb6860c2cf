# springtracker application context
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .utils.config import load_settings, recent_days, resolve_db_path
from .utils.logging_setup import get_logger
from .models.db import DB
from .models.store import IssueStore
from .repositories.sqlite_store_repository import SQLiteStoreRepository
from .services.award_evaluator import AwardEvaluator, load_awards
from .services.filter_catalog import FilterCatalog
from .services.issue_query import IssueQuery
from .services.tag_association import TagAssociation

@dataclass
class AppContext:
    """Central container for shared app resources."""
    db_path: Path
    db: DB
    store: IssueStore
    repo: SQLiteStoreRepository
    catalog: FilterCatalog
    query: IssueQuery
    tags: TagAssociation
    awards: AwardEvaluator

    @classmethod
    def create(cls, db_path: Optional[Path] = None, settings: Optional[Dict[str, Any]] = None) -> "AppContext":
        """Open the DB, load the store snapshot, and wire services."""
        log = get_logger("AppContext")
        settings = settings if settings is not None else load_settings()
        db_path = db_path or resolve_db_path(settings)

        db = DB(db_path)
        repo = SQLiteStoreRepository(db)
        repo.ensure_schema()
        store = IssueStore()
        repo.load(store)

        awards = AwardEvaluator(load_awards(settings.get("awards", {}).get("catalog")))
        log.info("AppContext initialized with DB=%s", db_path)
        return cls(
            db_path=db_path,
            db=db,
            store=store,
            repo=repo,
            catalog=FilterCatalog(recent_days(settings)),
            query=IssueQuery(store),
            tags=TagAssociation(store),
            awards=awards,
        )

    def save(self) -> bool:
        return self.repo.save(self.store)

    def close(self) -> None:
        self.save()
        self.db.close()
