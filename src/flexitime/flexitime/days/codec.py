from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import format_clock, format_duration
from ..core.enums import RecordSchema
from ..core.exceptions import RecordDecodeError, ValidationError
from ..workday.policy import WorkdayLengthPolicy
from .decoders.base import RowDecoder
from .decoders.current_decoder import CurrentRowDecoder
from .decoders.legacy_decoder import LegacyRowDecoder
from .model import DayRecord

logger = logging.getLogger(__name__)


class DayRecordCodec:
    """Converts DayRecords to and from stored table rows.

    Rows are always written in the current layout. Reading tries each known
    layout in priority order and keeps the first one that validates.
    """

    def __init__(self, policy: WorkdayLengthPolicy, *, decoders: Optional[Sequence[RowDecoder]] = None):
        self._decoders = tuple(decoders) if decoders is not None else (CurrentRowDecoder(), LegacyRowDecoder(policy))

    def encode(self, record: DayRecord) -> tuple[str, ...]:
        return (
            record.work_date.isoformat(),
            f"{record.expected_length_seconds / 3600:.2f}",
            format_clock(record.start),
            format_clock(record.end),
            format_duration(record.work_seconds),
            format_duration(record.break_seconds),
            format_duration(record.flexi_seconds),
        )

    def decode_versioned(self, row: Sequence[str]) -> tuple[RecordSchema, DayRecord]:
        cells = [str(c).strip() for c in row]
        errors: list[str] = []
        for decoder in self._decoders:
            if not decoder.accepts(cells):
                continue
            try:
                record = decoder.decode(cells)
            except ValidationError as e:
                errors.append(f"{decoder.schema.value}: {e}")
                continue
            if decoder.schema != RecordSchema.CURRENT:
                logger.info("Read %s row for %s", decoder.schema.value.lower(), record.work_date)
            return decoder.schema, record

        detail = "; ".join(errors) or f"unexpected field count {len(cells)}"
        raise RecordDecodeError(f"Unrecognized day row {cells!r} ({detail})")

    def decode(self, row: Sequence[str]) -> DayRecord:
        return self.decode_versioned(row)[1]
