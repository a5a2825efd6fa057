from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: str) -> date | None:
    try:
        return parse_iso_date(value)
    except ValueError:
        return None


def to_epoch(value: datetime) -> int:
    """Naive clock timestamps are read as UTC: no offset is ever applied."""
    return int(value.replace(tzinfo=timezone.utc).timestamp())


def from_epoch(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(tzinfo=None)


def day_start_epoch(day: date) -> int:
    return to_epoch(datetime(day.year, day.month, day.day))


def format_clock(seconds: int | None) -> str:
    """Epoch seconds -> HH:MM (empty for a missing timestamp)."""
    if seconds is None:
        return ""
    return from_epoch(seconds).strftime("%H:%M")


def format_duration(seconds: int) -> str:
    """Signed seconds -> H:MM.

    Sub-minute remainders are truncated; `-` is prepended only for negative
    values. Hours are not wrapped, so totals above a day stay readable.
    """
    magnitude = abs(int(seconds))
    hours, rest = divmod(magnitude, 3600)
    text = f"{hours}:{rest // 60:02d}"
    return f"-{text}" if seconds < 0 else text


def parse_duration(value: str) -> int:
    """Inverse of format_duration: `H:MM` / `-H:MM` -> signed seconds."""
    text = (value or "").strip()
    negative = text.startswith("-")
    if negative or text.startswith("+"):
        text = text[1:]

    parts = text.split(":")
    if len(parts) != 2 or not parts[0].isdigit() or not parts[1].isdigit():
        raise ValidationError(f"Invalid duration: {value!r}")

    hours, minutes = int(parts[0]), int(parts[1])
    if minutes >= 60:
        raise ValidationError(f"Invalid duration: {value!r}")

    seconds = hours * 3600 + minutes * 60
    return -seconds if negative else seconds


def parse_clock(value: str) -> tuple[int, int]:
    """HH:MM -> (hour, minute)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%H:%M")
    except ValueError as e:
        raise ValidationError(f"Invalid clock time: {value!r}") from e
    return parsed.hour, parsed.minute
