from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ...clocking.model import Interval
from ...workday.policy import WorkdayLengthPolicy
from ..model import DayRecord
from .base import DayMetricsCalculator


class StandardDayMetricsCalculator(DayMetricsCalculator):
    """Standard rule: gaps between runs are breaks, flexi = work - expected."""

    def __init__(self, policy: WorkdayLengthPolicy):
        self._policy = policy

    def calculate(self, intervals: Sequence[Interval], day: date) -> Optional[DayRecord]:
        if not intervals:
            return None

        start = intervals[0].start
        end = intervals[-1].end
        break_seconds = sum(nxt.start - prev.end for prev, nxt in zip(intervals, intervals[1:]))
        work_seconds = (end - start) - break_seconds
        expected = self._policy.expected_seconds(day)

        return DayRecord(
            work_date=day,
            expected_length_seconds=expected,
            start=start,
            end=end,
            work_seconds=work_seconds,
            break_seconds=break_seconds,
            flexi_seconds=work_seconds - expected,
        )

    def fallback(self, day: date) -> DayRecord:
        expected = self._policy.expected_seconds(day)
        return DayRecord(
            work_date=day,
            expected_length_seconds=expected,
            start=None,
            end=None,
            work_seconds=0,
            break_seconds=0,
            flexi_seconds=-expected,
        )
