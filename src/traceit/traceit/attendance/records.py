from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Union

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

RecordKey = tuple[date, str]
RecordMap = Mapping[RecordKey, AttendanceStatus]


@dataclass(frozen=True)
class AttendanceRecord:
    """An explicit mark for one occurrence. Unmarking deletes the record."""

    day: date
    slot_id: str
    status: AttendanceStatus

    @property
    def key(self) -> RecordKey:
        return record_key(self.day, self.slot_id)


def record_key(day: date, slot_id: str) -> RecordKey:
    return (day, str(slot_id))


def format_record_key(key: RecordKey) -> str:
    """Legacy string form: "yyyy-MM-dd-<slotId>"."""
    day, slot_id = key
    return f"{format_iso_date(day)}-{slot_id}"


def parse_record_key(value: str) -> RecordKey:
    """Inverse of format_record_key; the date is always the first 10 chars."""
    text = str(value)
    if len(text) < 12 or text[10] != "-":
        raise ValidationError(f"Invalid record key: {value!r}")
    return record_key(parse_iso_date(text[:10]), text[11:])


def parse_record(payload: Mapping[str, Any]) -> AttendanceRecord:
    if not isinstance(payload, Mapping):
        raise ValidationError("Each record must be an object")
    return AttendanceRecord(
        day=parse_iso_date(require_non_empty(payload.get("date"), "Record date")),
        slot_id=require_non_empty(payload.get("slotId"), "Record slot id"),
        status=require_choice(payload.get("status"), "Record status", AttendanceStatus),
    )


def build_record_map(records: Union[Iterable[Any], Mapping[str, Any], None]) -> dict[RecordKey, AttendanceStatus]:
    """Normalize records into the engine's sparse map.

    Accepts AttendanceRecord objects, record dicts ({"date", "slotId", "status"})
    or a mapping of legacy string keys to status strings. Later entries win.
    """
    result: dict[RecordKey, AttendanceStatus] = {}
    if not records:
        return result

    if isinstance(records, (str, bytes)) or not isinstance(records, Iterable):
        raise ValidationError("Records must be a list or an object")

    if isinstance(records, Mapping):
        for raw_key, raw_status in records.items():
            key = raw_key if isinstance(raw_key, tuple) else parse_record_key(raw_key)
            result[key] = require_choice(raw_status, "Record status", AttendanceStatus)
        return result

    for item in records:
        record = item if isinstance(item, AttendanceRecord) else parse_record(item)
        result[record.key] = record.status
    return result
