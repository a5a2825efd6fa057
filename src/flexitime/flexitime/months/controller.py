from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_duration
from ..container import Container
from ..days.controller import day_json
from .model import MonthTotals


def totals_json(totals: MonthTotals) -> dict:
    return {
        "work": format_duration(totals.work_seconds),
        "break": format_duration(totals.break_seconds),
        "flexi": format_duration(totals.flexi_seconds),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/months/<int:year>/<int:month>/render", methods=["POST"], endpoint="render_month")
    def render_month(year: int, month: int):
        record = container.month_service.render_month(year, month)
        return jsonify(
            {
                "success": True,
                "month": record.label,
                "days": [day_json(container.codec, r) for r in record.day_records],
                "totals": totals_json(record.totals),
            }
        )
