from __future__ import annotations

from dataclasses import dataclass, field

from ..months.model import MonthRecord, MonthTotals


@dataclass(frozen=True)
class CumulativeReport:
    months: list[MonthRecord] = field(default_factory=list)
    totals: MonthTotals = field(default_factory=MonthTotals)
