"""Constants and defaults.

Note: Keep document layout names here so the store, codec and services agree.
"""

from __future__ import annotations

from datetime import date

from ..workday.model import WorkdayLengthRule

DAY_BLOCK_NAME = "workday"
MONTH_BLOCK_NAME = "monthly-summary"

TABLE_HEADER = ("date", "day-len", "start", "end", "work", "break", "flexi")
TOTAL_LABEL = "total"

# 1-based column indices of the summed columns (work, break, flexi).
SUMMED_COLUMNS = (5, 6, 7)

MONTH_DOCUMENT_PREFIX = "summary-"
DEFAULT_DOCUMENT_EXT = ".org"

# Most recent range first; the first matching rule wins.
DEFAULT_WORKDAY_RULES = (
    WorkdayLengthRule(range_start=date(2024, 4, 1), range_end=date(9999, 12, 31), hours=6.0),
    WorkdayLengthRule(range_start=date(1970, 1, 1), range_end=date(2024, 4, 1), hours=7.5),
)
