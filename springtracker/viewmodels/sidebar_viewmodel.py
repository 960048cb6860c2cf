# Rev 0.1.0
from __future__ import annotations

from typing import Any, Dict

from PySide6.QtCore import QObject, Signal

from ..models.filters import Filter
from ..models.store import IssueStore
from ..services.filter_catalog import FilterCatalog
from ..services.issue_query import IssueQuery


class SidebarViewModel(QObject):
    """
    VM for the filter sidebar.
    Emits:
      - filtersReloaded(smart_rows: list[dict], tag_rows: list[dict])
    Tag rows carry the tag's active issue count as "badge".
    """

    filtersReloaded = Signal(list, list)

    def __init__(self, store: IssueStore, catalog: FilterCatalog, query: IssueQuery):
        super().__init__()
        self._store = store
        self._catalog = catalog
        self._query = query
        self._store.changed.connect(self.reload)

    # ---- queries ----
    def reload(self) -> None:
        smart = [self._row(f) for f in self._catalog.list_smart_filters()]
        tags = [self._row(f) for f in self._catalog.list_tag_filters(self._store.tags())]
        self.filtersReloaded.emit(smart, tags)

    def _row(self, flt: Filter) -> Dict[str, Any]:
        badge = self._query.active_issue_count(flt)
        return {
            "filter": flt,
            "name": flt.name,
            "icon": flt.icon,
            "badge": badge,
            "hint": f"{badge} issue" if badge == 1 else f"{badge} issues",
        }

    # ---- commands ----
    def rename(self, flt: Filter, name: str) -> bool:
        if flt.tag is None:
            return False
        return self._store.rename_tag(flt.tag, name)

    def delete(self, flt: Filter) -> bool:
        if flt.tag is None:
            return False
        ok = self._store.delete(flt.tag)
        if ok and self._catalog.selected_filter == flt:
            self._catalog.select(None)
        return ok
