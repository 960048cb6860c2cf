# Rev 0.1.0

"""Award evaluation (Rev 0.1.0)
Badges are derived from activity counters on every call; nothing is stored.
"""
from __future__ import annotations
from pathlib import Path
from typing import List, Mapping, Optional

from ..models.awards import Award
from ..models.store import IssueStore
from ..models.types import ActivityCounters
from ..utils.resources import decode

CATALOG_FILE = "awards.json"


def load_awards(path: Optional[str | Path] = None) -> List[Award]:
    def build(data) -> List[Award]:
        if not isinstance(data, list):
            raise TypeError("expected a list of awards")
        return [Award.from_record(rec) for rec in data]

    # user-supplied paths resolve against the cwd, not the bundle
    file = str(Path(path).expanduser().resolve()) if path else CATALOG_FILE
    return decode(file, build)


def counters_for(store: IssueStore) -> ActivityCounters:
    issues = store.issues()
    return {
        "issues": len(issues),
        "closed": sum(1 for i in issues if i.completed),
        "tags": len(store.tags()),
        "unlock": 0,
    }


class AwardEvaluator:
    def __init__(self, awards: Optional[List[Award]] = None):
        self._awards = awards if awards is not None else load_awards()

    @property
    def awards(self) -> List[Award]:
        return list(self._awards)

    @staticmethod
    def has_earned(award: Award, counters: Mapping[str, int]) -> bool:
        if award.criterion not in counters:
            return False
        return counters[award.criterion] >= award.value

    def award_title(self, award: Award, counters: Mapping[str, int]) -> str:
        return f"Unlocked: {award.name}" if self.has_earned(award, counters) else "Locked"

    def earned_awards(self, counters: Mapping[str, int]) -> List[Award]:
        return [a for a in self._awards if self.has_earned(a, counters)]
