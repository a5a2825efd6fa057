from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..months.controller import totals_json


def register(app: Flask, container: Container) -> None:
    @app.route("/report", methods=["GET"], endpoint="cumulative_report")
    def cumulative_report():
        report = container.report_service.cumulative_report()
        return jsonify(
            {
                "success": True,
                "months": [{"month": m.label, "totals": totals_json(m.totals)} for m in report.months],
                "totals": totals_json(report.totals),
            }
        )
