from __future__ import annotations

import fnmatch
from datetime import date, datetime
from typing import Optional

from src.flexitime.flexitime.common.datetime_utils import to_epoch
from src.flexitime.flexitime.core.enums import BlockStatus
from src.flexitime.flexitime.documents.markup import read_block_rows, replace_block
from src.flexitime.flexitime.documents.model import BlockRead, TableBlock


class InMemoryDocuments:
    """Document store keeping raw texts in a dict (same markup as the file store)."""

    def __init__(self, texts: Optional[dict[str, str]] = None):
        self.texts: dict[str, str] = dict(texts or {})
        self.writes: list[str] = []

    def list_names(self, pattern: str):
        return sorted(n for n in self.texts if fnmatch.fnmatchcase(n, pattern))

    def read_text(self, name: str) -> Optional[str]:
        return self.texts.get(name)

    def read_block(self, name: str, *, block: str) -> BlockRead:
        text = self.texts.get(name)
        if text is None:
            return BlockRead(status=BlockStatus.NO_DOCUMENT)
        rows = read_block_rows(text, block)
        if not rows:
            return BlockRead(status=BlockStatus.NO_BLOCK)
        return BlockRead(status=BlockStatus.FOUND, rows=tuple(rows))

    def write_block(self, name: str, *, block: str, table: TableBlock) -> None:
        self.texts[name] = replace_block(self.texts.get(name, ""), block, table)
        self.writes.append(name)


def at(hour: int, minute: int = 0, day: date = date(2024, 3, 1)) -> int:
    return to_epoch(datetime(day.year, day.month, day.day, hour, minute))


def clock_line(day: date, begin: str, end: Optional[str] = None) -> str:
    stamp = day.strftime("%Y-%m-%d %a")
    if end is None:
        return f"CLOCK: [{stamp} {begin}]"
    return f"CLOCK: [{stamp} {begin}]--[{stamp} {end}] =>  0:00"


def day_document(day: date, *spans: tuple[str, Optional[str]]) -> str:
    lines = ["* Work", ":LOGBOOK:"]
    lines += [clock_line(day, b, e) for b, e in spans]
    lines += [":END:", ""]
    return "\n".join(lines)


