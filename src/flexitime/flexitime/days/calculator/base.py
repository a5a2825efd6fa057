from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence

from ...clocking.model import Interval
from ..model import DayRecord


class DayMetricsCalculator(ABC):
    """Calculator interface (Strategy Pattern for day metrics)."""

    @abstractmethod
    def calculate(self, intervals: Sequence[Interval], day: date) -> Optional[DayRecord]:
        """Metrics for merged, ordered intervals; None when there are none."""

        raise NotImplementedError

    @abstractmethod
    def fallback(self, day: date) -> DayRecord:
        """Row used for a day document that exists but carries no metrics."""

        raise NotImplementedError
