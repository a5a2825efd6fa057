from __future__ import annotations

from typing import Iterable

from ..core.exceptions import MalformedIntervalsError
from .model import Interval


class IntervalMerger:
    """Fuses touching clock pairs into maximal continuous intervals.

    Clock pairs never overlap; they can only share a boundary (a clock-out
    equal to the next clock-in). Such a shared point shows up once as an end
    and once as a start and cancels out, which is what glues adjacent runs.
    Whatever is left over are the outer boundaries of the merged runs.
    """

    def merge(self, pairs: Iterable[tuple[int, int]]) -> list[Interval]:
        starts: set[int] = set()
        ends: set[int] = set()

        for begin, end in pairs:
            if begin in ends:
                ends.remove(begin)
            else:
                starts.add(begin)

            if end in starts:
                starts.remove(end)
            else:
                ends.add(end)

        if len(starts) != len(ends):
            raise MalformedIntervalsError(f"Unbalanced clock boundaries: {len(starts)} starts, {len(ends)} ends")

        intervals = [Interval(start=s, end=e) for s, e in zip(sorted(starts), sorted(ends))]
        for interval in intervals:
            if interval.start >= interval.end:
                raise MalformedIntervalsError(f"Clock pairs do not form intervals near {interval.start}")
        return intervals

    def merge_intervals(self, intervals: Iterable[Interval]) -> list[Interval]:
        return self.merge((i.start, i.end) for i in intervals)
