from __future__ import annotations

from dataclasses import dataclass, field

from ..days.model import DayRecord


@dataclass(frozen=True)
class MonthTotals:
    work_seconds: int = 0
    break_seconds: int = 0
    flexi_seconds: int = 0

    def __add__(self, other: "MonthTotals") -> "MonthTotals":
        return MonthTotals(
            work_seconds=self.work_seconds + other.work_seconds,
            break_seconds=self.break_seconds + other.break_seconds,
            flexi_seconds=self.flexi_seconds + other.flexi_seconds,
        )

    @classmethod
    def of(cls, records: list[DayRecord]) -> "MonthTotals":
        return cls(
            work_seconds=sum(r.work_seconds for r in records),
            break_seconds=sum(r.break_seconds for r in records),
            flexi_seconds=sum(r.flexi_seconds for r in records),
        )


@dataclass(frozen=True)
class MonthRecord:
    year: int
    month: int
    day_records: list[DayRecord] = field(default_factory=list)
    totals: MonthTotals = field(default_factory=MonthTotals)

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
