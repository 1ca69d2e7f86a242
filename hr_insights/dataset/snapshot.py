"""
Immutable snapshot of the employee dataset.
Loaded once per run and shared read-only by every report.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

import pandas as pd

from hr_insights.common.exceptions import InvalidRecordError
from hr_insights.dataset.columns import CANONICAL_COLUMNS


@dataclass(frozen=True)
class EmployeeDataset:
    """Validated employee records plus the bookkeeping of the load that produced them."""
    frame: pd.DataFrame
    source: str = "memory"
    skipped: int = 0
    errors: Tuple[InvalidRecordError, ...] = ()
    loaded_at: datetime = field(default_factory=datetime.now)

    def __len__(self) -> int:
        return len(self.frame)

    @property
    def empty(self) -> bool:
        return self.frame.empty

    def view(self) -> pd.DataFrame:
        """Return a copy of the records that callers are free to modify."""
        return self.frame.copy()

    @classmethod
    def empty_snapshot(cls, source: str = "memory") -> "EmployeeDataset":
        return cls(frame=pd.DataFrame(columns=CANONICAL_COLUMNS), source=source)
