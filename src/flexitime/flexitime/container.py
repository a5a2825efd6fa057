from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from .common.datetime_utils import parse_iso_date
from .core.constants import DEFAULT_DOCUMENT_EXT, DEFAULT_WORKDAY_RULES
from .core.exceptions import ConfigurationError
from .days.calculator.standard_calculator import StandardDayMetricsCalculator
from .days.codec import DayRecordCodec
from .days.service import DayService
from .documents.file_document_store import FileDocumentStore
from .documents.repository import DocumentStore
from .months.service import MonthService
from .reports.service import CumulativeReportService
from .workday.model import WorkdayLengthRule
from .workday.policy import WorkdayLengthPolicy


@dataclass(frozen=True)
class FlexitimeConfig:
    documents_dir: Path
    document_ext: str = DEFAULT_DOCUMENT_EXT
    workday_rules: tuple[WorkdayLengthRule, ...] = DEFAULT_WORKDAY_RULES


def parse_rules(raw: Iterable[Any]) -> tuple[WorkdayLengthRule, ...]:
    """Accept rules as WorkdayLengthRule or (start, end, hours) with ISO date strings."""
    out: list[WorkdayLengthRule] = []
    for item in raw:
        if isinstance(item, WorkdayLengthRule):
            out.append(item)
            continue
        try:
            start, end, hours = item
            out.append(
                WorkdayLengthRule(
                    range_start=parse_iso_date(str(start)),
                    range_end=parse_iso_date(str(end)),
                    hours=float(hours),
                )
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid workday rule: {item!r}") from e
    return tuple(out)


def config_from_settings(settings: Any) -> FlexitimeConfig:
    raw_rules = getattr(settings, "WORKDAY_RULES", None)
    return FlexitimeConfig(
        documents_dir=Path(getattr(settings, "DOCUMENTS_DIR")),
        document_ext=str(getattr(settings, "DOCUMENT_EXT", DEFAULT_DOCUMENT_EXT)),
        workday_rules=parse_rules(raw_rules) if raw_rules else DEFAULT_WORKDAY_RULES,
    )


@dataclass(frozen=True)
class Container:
    config: FlexitimeConfig

    documents: DocumentStore
    policy: WorkdayLengthPolicy
    calculator: StandardDayMetricsCalculator
    codec: DayRecordCodec

    day_service: DayService
    month_service: MonthService
    report_service: CumulativeReportService


def build_container(*, config: FlexitimeConfig, documents: Optional[DocumentStore] = None) -> Container:
    documents = documents or FileDocumentStore(config.documents_dir, ext=config.document_ext)

    policy = WorkdayLengthPolicy(config.workday_rules)
    calculator = StandardDayMetricsCalculator(policy)
    codec = DayRecordCodec(policy)

    day_service = DayService(documents, calculator, codec)
    month_service = MonthService(documents, calculator, codec)
    report_service = CumulativeReportService(documents, month_service)

    return Container(
        config=config,
        documents=documents,
        policy=policy,
        calculator=calculator,
        codec=codec,
        day_service=day_service,
        month_service=month_service,
        report_service=report_service,
    )
