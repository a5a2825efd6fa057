from __future__ import annotations

import logging
import re
from datetime import datetime

from ..common.datetime_utils import to_epoch
from .model import ClockEvent

logger = logging.getLogger(__name__)

_TIMESTAMP = r"\[(\d{4}-\d{2}-\d{2})[^\]]*?\s(\d{1,2}:\d{2})\]"
_CLOCK_LINE = re.compile(rf"^[ \t]*CLOCK:[ \t]*{_TIMESTAMP}(?:--{_TIMESTAMP})?", re.MULTILINE)


def _parse_timestamp(day: str, clock: str) -> int:
    return to_epoch(datetime.strptime(f"{day} {clock}", "%Y-%m-%d %H:%M"))


class ClockEventExtractor:
    """Reads clock lines out of a document's raw text.

    A clock line looks like::

        CLOCK: [2024-03-01 Fri 09:00]--[2024-03-01 Fri 12:00] =>  3:00

    and a line with only the opening timestamp is a clock that is still running.
    """

    def events(self, text: str) -> list[ClockEvent]:
        out: list[ClockEvent] = []
        for m in _CLOCK_LINE.finditer(text or ""):
            begin_day, begin_clock, end_day, end_clock = m.groups()
            begin = _parse_timestamp(begin_day, begin_clock)
            end = _parse_timestamp(end_day, end_clock) if end_day else None
            out.append(ClockEvent(begin=begin, end=end))
        return out

    def extract(self, text: str) -> list[tuple[int, int]]:
        """Closed clock events as (begin, end) pairs; open ones are dropped."""
        pairs: list[tuple[int, int]] = []
        for event in self.events(text):
            if not event.is_closed:
                logger.debug("Skipping open clock event starting at %s", event.begin)
                continue
            pairs.append((event.begin, event.end))
        return pairs
