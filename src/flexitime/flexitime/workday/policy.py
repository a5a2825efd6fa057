from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.exceptions import ConfigurationError
from .model import WorkdayLengthRule


class WorkdayLengthPolicy:
    """Maps a calendar date to the expected work duration.

    Rules are scanned in the given order and the first covering rule wins, so
    callers pass them most-recent-range-first.
    """

    def __init__(self, rules: Sequence[WorkdayLengthRule]):
        for rule in rules:
            if rule.range_start >= rule.range_end:
                raise ConfigurationError(f"Empty workday rule range: {rule.range_start} - {rule.range_end}")
            if rule.hours < 0:
                raise ConfigurationError(f"Negative workday length: {rule.hours}")
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[WorkdayLengthRule, ...]:
        return self._rules

    def lookup(self, day: date) -> float:
        for rule in self._rules:
            if rule.covers(day):
                return rule.hours
        raise ConfigurationError(f"No workday length configured for {day.isoformat()}")

    def expected_seconds(self, day: date) -> int:
        return int(round(self.lookup(day) * 3600))
