from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WorkdayLengthRule:
    """Expected workday length for dates in [range_start, range_end)."""

    range_start: date
    range_end: date
    hours: float

    def covers(self, day: date) -> bool:
        return self.range_start <= day < self.range_end
