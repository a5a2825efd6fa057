from __future__ import annotations

from typing import Sequence

from ...core.enums import RecordSchema
from ...core.exceptions import ValidationError
from ..model import DayRecord
from .base import RowDecoder, build_record, parse_row_date


class CurrentRowDecoder(RowDecoder):
    """date | day-len | start | end | work | break | flexi"""

    schema = RecordSchema.CURRENT
    field_count = 7

    def decode(self, row: Sequence[str]) -> DayRecord:
        work_date = parse_row_date(row[0])
        try:
            hours = float(row[1])
        except ValueError as e:
            raise ValidationError(f"Invalid day length: {row[1]!r}") from e

        return build_record(
            work_date=work_date,
            expected_length_seconds=int(round(hours * 3600)),
            start=row[2],
            end=row[3],
            work=row[4],
            pause=row[5],
            flexi=row[6],
        )
