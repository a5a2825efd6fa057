from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClockEvent:
    """One recorded span of presence; `end` is None while the clock is still running."""

    begin: int
    end: Optional[int] = None

    @property
    def is_closed(self) -> bool:
        return self.end is not None


@dataclass(frozen=True)
class Interval:
    """A continuous run of presence (epoch seconds, start < end)."""

    start: int
    end: int

    @property
    def seconds(self) -> int:
        return self.end - self.start
