from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..clocking.extractor import ClockEventExtractor
from ..clocking.merger import IntervalMerger
from ..core.constants import DAY_BLOCK_NAME, TABLE_HEADER
from ..core.exceptions import DocumentNotFoundError
from ..documents.model import TableBlock
from ..documents.repository import DocumentStore
from .calculator.base import DayMetricsCalculator
from .codec import DayRecordCodec
from .model import DayRecord

logger = logging.getLogger(__name__)


def day_document_name(day: date) -> str:
    return day.isoformat()


class DayService:
    def __init__(
        self,
        documents: DocumentStore,
        calculator: DayMetricsCalculator,
        codec: DayRecordCodec,
        *,
        extractor: Optional[ClockEventExtractor] = None,
        merger: Optional[IntervalMerger] = None,
    ):
        self._documents = documents
        self._calculator = calculator
        self._codec = codec
        self._extractor = extractor or ClockEventExtractor()
        self._merger = merger or IntervalMerger()

    def compute_day(self, day: date, text: str) -> Optional[DayRecord]:
        pairs = self._extractor.extract(text)
        intervals = self._merger.merge(pairs)
        return self._calculator.calculate(intervals, day)

    def render_day(self, day: date) -> Optional[DayRecord]:
        """Recompute a day document's metrics and rewrite its data block.

        A day without closed clock events gets an empty block and returns None.
        """
        name = day_document_name(day)
        text = self._documents.read_text(name)
        if text is None:
            raise DocumentNotFoundError(f"No day document for {day.isoformat()}")

        record = self.compute_day(day, text)
        rows = [self._codec.encode(record)] if record else []
        self._documents.write_block(name, block=DAY_BLOCK_NAME, table=TableBlock(header=TABLE_HEADER, rows=rows))

        if record:
            logger.info("Rendered %s: work=%ss flexi=%ss", name, record.work_seconds, record.flexi_seconds)
        else:
            logger.info("Rendered %s: no presence recorded", name)
        return record
