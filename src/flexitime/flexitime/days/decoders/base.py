from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Optional, Sequence

from ...common.datetime_utils import day_start_epoch, parse_clock, parse_duration, parse_iso_date
from ...core.enums import RecordSchema
from ...core.exceptions import ValidationError
from ..model import DayRecord


class RowDecoder(ABC):
    """Strategy Pattern: one decoder per stored row layout."""

    schema: RecordSchema
    field_count: int

    def accepts(self, row: Sequence[str]) -> bool:
        return len(row) == self.field_count

    @abstractmethod
    def decode(self, row: Sequence[str]) -> DayRecord:
        """Raise ValidationError when the row content does not fit this layout."""

        raise NotImplementedError


def parse_row_date(value: str) -> date:
    try:
        return parse_iso_date(value.strip())
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def parse_clock_on(day: date, value: str) -> Optional[int]:
    if not value.strip():
        return None
    hour, minute = parse_clock(value)
    return day_start_epoch(day) + hour * 3600 + minute * 60


def build_record(
    *,
    work_date: date,
    expected_length_seconds: int,
    start: str,
    end: str,
    work: str,
    pause: str,
    flexi: str,
) -> DayRecord:
    start_ts = parse_clock_on(work_date, start)
    end_ts = parse_clock_on(work_date, end)
    if (start_ts is None) != (end_ts is None):
        raise ValidationError("Start and end must both be present or both be empty")
    if start_ts is not None and end_ts < start_ts:
        # clocked out after midnight
        end_ts += int(timedelta(days=1).total_seconds())

    return DayRecord(
        work_date=work_date,
        expected_length_seconds=expected_length_seconds,
        start=start_ts,
        end=end_ts,
        work_seconds=parse_duration(work),
        break_seconds=parse_duration(pause),
        flexi_seconds=parse_duration(flexi),
    )
