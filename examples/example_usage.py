"""Example: use the service layer directly (no Flask).

Renders today's day document, then prints the cumulative flexi balance.
"""

from datetime import date

from config import load_settings

from src.flexitime.flexitime.common.datetime_utils import format_duration
from src.flexitime.flexitime.container import build_container, config_from_settings


def main():
    settings = load_settings()
    container = build_container(config=config_from_settings(settings))

    record = container.day_service.render_day(date.today())
    if record:
        print("today:", format_duration(record.work_seconds), "flexi", format_duration(record.flexi_seconds))

    report = container.report_service.cumulative_report()
    print("flexi balance:", format_duration(report.totals.flexi_seconds))


if __name__ == "__main__":
    main()
