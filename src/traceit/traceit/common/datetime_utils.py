from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import ISO_DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value)[:10], ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO timestamp; an offset, if any, is dropped (civil time)."""
    try:
        parsed = datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {value!r}") from None
    return parsed.replace(tzinfo=None)


def parse_clock_time(value: str) -> time:
    """Parse HH:MM (seconds, if present, are ignored)."""
    try:
        return datetime.strptime(str(value)[:5], TIME_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid time: {value!r}") from None


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
