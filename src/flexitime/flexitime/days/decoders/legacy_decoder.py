from __future__ import annotations

from typing import Sequence

from ...core.enums import RecordSchema
from ...workday.policy import WorkdayLengthPolicy
from ..model import DayRecord
from .base import RowDecoder, build_record, parse_row_date


class LegacyRowDecoder(RowDecoder):
    """date | start | end | work | break | flexi

    Older documents never stored the day length; it is taken from the policy.
    """

    schema = RecordSchema.LEGACY
    field_count = 6

    def __init__(self, policy: WorkdayLengthPolicy):
        self._policy = policy

    def decode(self, row: Sequence[str]) -> DayRecord:
        work_date = parse_row_date(row[0])
        return build_record(
            work_date=work_date,
            expected_length_seconds=self._policy.expected_seconds(work_date),
            start=row[1],
            end=row[2],
            work=row[3],
            pause=row[4],
            flexi=row[5],
        )
