"""Rebuild every summary-YYYY-MM document.

Note: Day documents are only read; run render_day first if their blocks are stale.
"""

from __future__ import annotations

import logging

from config import load_settings

from src.flexitime.flexitime.common.datetime_utils import format_duration
from src.flexitime.flexitime.container import build_container, config_from_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(config=config_from_settings(settings))
    if not container.config.documents_dir.is_dir():
        raise SystemExit(f"Documents directory not found: {container.config.documents_dir}")

    report = container.report_service.cumulative_report()
    for m in report.months:
        print(f"{m.label}: work {format_duration(m.totals.work_seconds)}, flexi {format_duration(m.totals.flexi_seconds)}")
    print(f"OK: {len(report.months)} month(s), flexi balance {format_duration(report.totals.flexi_seconds)}")


if __name__ == "__main__":
    main()
