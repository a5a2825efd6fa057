from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import format_duration, try_parse_iso_date
from ..core.constants import DAY_BLOCK_NAME, MONTH_BLOCK_NAME, MONTH_DOCUMENT_PREFIX, SUMMED_COLUMNS, TABLE_HEADER, TOTAL_LABEL
from ..core.enums import BlockStatus
from ..core.exceptions import RecordDecodeError, ValidationError
from ..days.calculator.base import DayMetricsCalculator
from ..days.codec import DayRecordCodec
from ..days.model import DayRecord
from ..documents.model import TableBlock
from ..documents.repository import DocumentStore
from .model import MonthRecord, MonthTotals

logger = logging.getLogger(__name__)


def month_document_name(year: int, month: int) -> str:
    return f"{MONTH_DOCUMENT_PREFIX}{year:04d}-{month:02d}"


def day_document_pattern(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}-[0-9][0-9]"


class MonthService:
    """Builds a month table by re-scanning every day document of that month."""

    def __init__(self, documents: DocumentStore, calculator: DayMetricsCalculator, codec: DayRecordCodec):
        self._documents = documents
        self._calculator = calculator
        self._codec = codec

    def _day_record(self, name: str) -> Optional[DayRecord]:
        day = try_parse_iso_date(name)
        if day is None:
            return None

        read = self._documents.read_block(name, block=DAY_BLOCK_NAME)
        if read.status == BlockStatus.NO_DOCUMENT:
            return None
        if read.status == BlockStatus.NO_BLOCK:
            return self._calculator.fallback(day)

        try:
            return self._codec.decode(read.rows[0])
        except RecordDecodeError as e:
            logger.warning("Day document %s has an unreadable row, counting it as empty: %s", name, e)
            return self._calculator.fallback(day)

    def aggregate(self, year: int, month: int) -> MonthRecord:
        if not 1 <= int(month) <= 12:
            raise ValidationError(f"Invalid month: {month}")

        records: list[DayRecord] = []
        for name in self._documents.list_names(day_document_pattern(year, month)):
            record = self._day_record(name)
            if record is not None:
                records.append(record)

        if not records:
            return MonthRecord(year=year, month=month)

        records.sort(key=lambda r: r.work_date)
        return MonthRecord(year=year, month=month, day_records=records, totals=MonthTotals.of(records))

    def to_table(self, record: MonthRecord) -> TableBlock:
        totals = record.totals
        total_row = (
            TOTAL_LABEL,
            "",
            "",
            "",
            format_duration(totals.work_seconds),
            format_duration(totals.break_seconds),
            format_duration(totals.flexi_seconds),
        )
        rows = [total_row] + [self._codec.encode(r) for r in record.day_records]

        if not record.day_records:
            return TableBlock(header=TABLE_HEADER, rows=rows)

        # Row 1 is the header, row 2 the total; day rows start at 3.
        formulas = [f"@2${col}=vsum(@3..@>);T" for col in SUMMED_COLUMNS]
        return TableBlock(header=TABLE_HEADER, rows=rows, formulas=formulas)

    def render_month(self, year: int, month: int) -> MonthRecord:
        record = self.aggregate(year, month)
        name = month_document_name(year, month)
        self._documents.write_block(name, block=MONTH_BLOCK_NAME, table=self.to_table(record))
        logger.info("Rendered %s: %d day(s), flexi=%ss", name, len(record.day_records), record.totals.flexi_seconds)
        return record
