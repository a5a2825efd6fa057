from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class DayRecord:
    """Derived metrics of one day document.

    `start`/`end` are epoch seconds, absent for a day with no presence.
    flexi_seconds is always work_seconds - expected_length_seconds.
    """

    work_date: date
    expected_length_seconds: int
    start: Optional[int]
    end: Optional[int]
    work_seconds: int
    break_seconds: int
    flexi_seconds: int

    @property
    def has_presence(self) -> bool:
        return self.start is not None
