# Rev 0.1.0

"""Filter catalog (Rev 0.1.0)
Smart filters plus one filter per tag, and the active selection.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from PySide6.QtCore import QObject, Signal

from ..models.entities import Tag
from ..models.filters import ALL, RECENT_DAYS, RECENT_ID, Filter, recent_filter, tag_filter


class FilterCatalog(QObject):
    selectedFilterChanged = Signal(object)

    def __init__(self, recent_days: int = RECENT_DAYS):
        super().__init__()
        self._recent_days = recent_days
        self._selected: Optional[Filter] = ALL

    def list_smart_filters(self) -> List[Filter]:
        # Recent's cutoff is recomputed on every call
        return [ALL, recent_filter(self._recent_days)]

    def list_tag_filters(self, tags: Iterable[Tag]) -> List[Filter]:
        return [tag_filter(tag) for tag in sorted(tags)]

    @property
    def selected_filter(self) -> Optional[Filter]:
        if self._selected is not None and self._selected.id == RECENT_ID:
            return recent_filter(self._recent_days)
        return self._selected

    def select(self, flt: Optional[Filter]) -> None:
        if flt == self._selected:
            return
        self._selected = flt
        self.selectedFilterChanged.emit(flt)
