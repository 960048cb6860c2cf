# springtracker type definitions
# Rev 0.1.0

from __future__ import annotations
from typing import Dict, Literal

# Award criterion ("issues", "closed", "tags", "unlock") -> current count
ActivityCounters = Dict[str, int]

IssueStatus = Literal["Open", "Closed"]
