from __future__ import annotations

from datetime import date

import pytest

from src.flexitime.flexitime.core.constants import DAY_BLOCK_NAME
from src.flexitime.flexitime.core.enums import BlockStatus
from src.flexitime.flexitime.core.exceptions import DocumentNotFoundError
from src.flexitime.flexitime.days.calculator.standard_calculator import StandardDayMetricsCalculator
from src.flexitime.flexitime.days.codec import DayRecordCodec
from src.flexitime.flexitime.days.service import DayService

from tests.helpers import day_document


def _service(documents, policy) -> DayService:
    return DayService(documents, StandardDayMetricsCalculator(policy), DayRecordCodec(policy))


def test_render_day_writes_block(documents, policy):
    day = date(2024, 3, 1)
    documents.texts["2024-03-01"] = day_document(day, ("09:00", "12:00"), ("12:00", "13:00"), ("13:30", "17:30"))

    record = _service(documents, policy).render_day(day)

    assert record.work_seconds == 8 * 3600
    assert record.break_seconds == 30 * 60
    text = documents.texts["2024-03-01"]
    assert text.startswith("* Work\n:LOGBOOK:")
    assert "#+BEGIN: workday" in text
    assert "| date | day-len | start | end | work | break | flexi |" in text
    assert "| 2024-03-01 | 7.50 | 09:00 | 17:30 | 8:00 | 0:30 | 0:30 |" in text


def test_render_day_twice_keeps_one_block(documents, policy):
    day = date(2024, 3, 1)
    documents.texts["2024-03-01"] = day_document(day, ("09:00", "17:00"))
    svc = _service(documents, policy)

    svc.render_day(day)
    first = documents.texts["2024-03-01"]
    svc.render_day(day)

    assert documents.texts["2024-03-01"] == first
    assert first.count("#+BEGIN: workday") == 1


def test_render_day_ignores_running_clock(documents, policy):
    day = date(2024, 3, 1)
    documents.texts["2024-03-01"] = day_document(day, ("09:00", "12:00"), ("13:00", None))

    record = _service(documents, policy).render_day(day)

    assert record.end - record.start == 3 * 3600


def test_day_without_presence_gets_empty_block(documents, policy):
    day = date(2024, 3, 2)
    documents.texts["2024-03-02"] = day_document(day, ("09:00", None))

    assert _service(documents, policy).render_day(day) is None
    assert "#+BEGIN: workday" in documents.texts["2024-03-02"]
    assert documents.read_block("2024-03-02", block=DAY_BLOCK_NAME).status == BlockStatus.NO_BLOCK


def test_missing_day_document(documents, policy):
    with pytest.raises(DocumentNotFoundError):
        _service(documents, policy).render_day(date(2024, 3, 3))
    assert documents.writes == []
