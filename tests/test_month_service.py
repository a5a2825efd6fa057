from __future__ import annotations

from datetime import date

import pytest

from src.flexitime.flexitime.core.exceptions import ValidationError
from src.flexitime.flexitime.days.calculator.standard_calculator import StandardDayMetricsCalculator
from src.flexitime.flexitime.days.codec import DayRecordCodec
from src.flexitime.flexitime.days.service import DayService
from src.flexitime.flexitime.months.service import MonthService, month_document_name

from tests.helpers import day_document

LEGACY_DAY = """* Work
#+BEGIN: workday
| 2024-03-05 | 08:00 | 16:00 | 7:30 | 0:30 | 0:00 |
#+END:
"""


def _services(documents, policy):
    calc = StandardDayMetricsCalculator(policy)
    codec = DayRecordCodec(policy)
    return DayService(documents, calc, codec), MonthService(documents, calc, codec)


def test_only_existing_documents_produce_rows(documents, policy):
    days, months = _services(documents, policy)
    documents.texts["2024-03-01"] = day_document(date(2024, 3, 1), ("09:00", "12:00"), ("12:30", "17:00"))
    documents.texts["2024-03-04"] = "* Holiday?\n"
    days.render_day(date(2024, 3, 1))

    m = months.aggregate(2024, 3)

    assert [r.work_date for r in m.day_records] == [date(2024, 3, 1), date(2024, 3, 4)]
    assert m.totals.work_seconds == 7 * 3600 + 30 * 60
    assert m.totals.break_seconds == 30 * 60
    assert m.totals.flexi_seconds == -(7 * 3600 + 30 * 60)


def test_other_months_and_summaries_are_not_scanned(documents, policy):
    _, months = _services(documents, policy)
    documents.texts["2024-02-29"] = "* Work\n"
    documents.texts["2024-03-04"] = "* Work\n"
    documents.texts["summary-2024-03"] = "old\n"
    documents.texts["2024-03-notes"] = "notes\n"

    m = months.aggregate(2024, 3)

    assert [r.work_date for r in m.day_records] == [date(2024, 3, 4)]


def test_legacy_rows_are_read(documents, policy):
    _, months = _services(documents, policy)
    documents.texts["2024-03-05"] = LEGACY_DAY

    m = months.aggregate(2024, 3)

    [r] = m.day_records
    assert r.expected_length_seconds == 27000
    assert r.work_seconds == 7 * 3600 + 30 * 60


def test_unreadable_row_counts_as_empty_day(documents, policy):
    _, months = _services(documents, policy)
    documents.texts["2024-03-06"] = "#+BEGIN: workday\n| 2024-03-06 | garbage |\n#+END:\n"

    [r] = months.aggregate(2024, 3).day_records

    assert r.flexi_seconds == -27000


def test_render_month_writes_summary_with_formulas(documents, policy):
    days, months = _services(documents, policy)
    documents.texts["2024-03-01"] = day_document(date(2024, 3, 1), ("09:00", "12:00"), ("12:30", "17:00"))
    documents.texts["2024-03-04"] = "* Work\n"
    days.render_day(date(2024, 3, 1))

    months.render_month(2024, 3)

    text = documents.texts[month_document_name(2024, 3)]
    lines = text.splitlines()
    assert lines[0] == "#+BEGIN: monthly-summary"
    assert lines[1] == "| date | day-len | start | end | work | break | flexi |"
    assert lines[3] == "| total |  |  |  | 7:30 | 0:30 | -7:30 |"
    assert lines[4] == "| 2024-03-01 | 7.50 | 09:00 | 17:00 | 7:30 | 0:30 | 0:00 |"
    assert lines[5] == "| 2024-03-04 | 7.50 |  |  | 0:00 | 0:00 | -7:30 |"
    assert lines[6] == "#+TBLFM: @2$5=vsum(@3..@>);T::@2$6=vsum(@3..@>);T::@2$7=vsum(@3..@>);T"
    assert lines[7] == "#+END:"


def test_empty_month_has_no_rows_and_no_formulas(documents, policy):
    _, months = _services(documents, policy)

    m = months.render_month(2024, 5)

    assert m.day_records == []
    assert m.totals.work_seconds == 0 and m.totals.flexi_seconds == 0
    text = documents.texts["summary-2024-05"]
    assert "| total |  |  |  | 0:00 | 0:00 | 0:00 |" in text
    assert "#+TBLFM" not in text


def test_invalid_month(documents, policy):
    _, months = _services(documents, policy)

    with pytest.raises(ValidationError):
        months.aggregate(2024, 13)
