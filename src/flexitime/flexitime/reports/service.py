from __future__ import annotations

import logging

from ..common.datetime_utils import try_parse_iso_date
from ..documents.repository import DocumentStore
from ..months.model import MonthTotals
from ..months.service import MonthService
from .model import CumulativeReport

logger = logging.getLogger(__name__)

_ANY_DAY_DOCUMENT = "[0-9][0-9][0-9][0-9]-[0-9][0-9]-[0-9][0-9]"


class CumulativeReportService:
    def __init__(self, documents: DocumentStore, months: MonthService):
        self._documents = documents
        self._months = months

    def discover_months(self) -> list[tuple[int, int]]:
        found: set[tuple[int, int]] = set()
        for name in self._documents.list_names(_ANY_DAY_DOCUMENT):
            day = try_parse_iso_date(name)
            if day is not None:
                found.add((day.year, day.month))
        return sorted(found)

    def cumulative_report(self) -> CumulativeReport:
        """Regenerate every month that has day documents and sum their totals."""
        months = [self._months.render_month(year, month) for year, month in self.discover_months()]

        totals = MonthTotals()
        for m in months:
            totals = totals + m.totals

        logger.info("Cumulative report over %d month(s): flexi=%ss", len(months), totals.flexi_seconds)
        return CumulativeReport(months=months, totals=totals)
