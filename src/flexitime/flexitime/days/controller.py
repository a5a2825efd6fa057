from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import try_parse_iso_date
from ..core.constants import TABLE_HEADER
from ..core.exceptions import ValidationError
from ..container import Container
from .codec import DayRecordCodec
from .model import DayRecord


def day_json(codec: DayRecordCodec, record: DayRecord) -> dict:
    """Stored row as a JSON object keyed by the table header."""
    return dict(zip(TABLE_HEADER, codec.encode(record)))


def register(app: Flask, container: Container) -> None:
    @app.route("/days/<day>/render", methods=["POST"], endpoint="render_day")
    def render_day(day: str):
        parsed = try_parse_iso_date(day)
        if parsed is None:
            raise ValidationError(f"Invalid date: {day}")

        record = container.day_service.render_day(parsed)
        return jsonify({"success": True, "day": day_json(container.codec, record) if record else None})
