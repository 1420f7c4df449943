from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..common.validators import require_choice, require_int_in_range, require_non_empty
from ..core.constants import FIRST_WEEKEND_DAY
from ..core.enums import SlotKind
from ..core.exceptions import ValidationError
from .model import Slot, Timetable


class TimetableService:
    """Builds validated timetables from raw (JSON-shaped) payloads.

    Slot contract checks live here: the attendance engine trusts what it is given.
    """

    def build_slot(self, payload: Mapping[str, Any]) -> Slot:
        if not isinstance(payload, Mapping):
            raise ValidationError("Each slot must be an object")
        slot_id = require_non_empty(payload.get("id"), "Slot id")
        day = require_int_in_range(payload.get("day"), "Slot day", 0, FIRST_WEEKEND_DAY - 1)

        start_time = parse_clock_time(require_non_empty(payload.get("startTime"), "Start time"))
        end_time = parse_clock_time(require_non_empty(payload.get("endTime"), "End time"))
        if end_time <= start_time:
            raise ValidationError(f"Slot {slot_id}: end time must be after start time")

        # Stored slots call this "subject"; accept both spellings.
        code = payload.get("subjectCode", payload.get("subject"))
        subject_code = require_non_empty(code, "Subject code")

        kind = require_choice(payload.get("type") or payload.get("kind") or SlotKind.LECTURE.value, "Slot type", SlotKind)
        span_raw = payload.get("span", payload.get("rowSpan"))
        span = require_int_in_range(1 if span_raw is None else span_raw, "Slot span", 1, 24)

        return Slot(
            slot_id=slot_id,
            day=day,
            start_time=start_time,
            end_time=end_time,
            subject_code=subject_code,
            kind=kind,
            span=span,
            subject_name=(payload.get("subjectName") or "").strip(),
            room=payload.get("room") or None,
            instructor=payload.get("instructor") or None,
        )

    def build_slots(self, payloads: Iterable[Mapping[str, Any]]) -> tuple[Slot, ...]:
        slots = tuple(self.build_slot(p) for p in payloads)
        seen: set[str] = set()
        for slot in slots:
            if slot.slot_id in seen:
                raise ValidationError(f"Duplicate slot id: {slot.slot_id}")
            seen.add(slot.slot_id)
        return slots

    def build_timetable(self, payload: Mapping[str, Any]) -> Timetable:
        if not isinstance(payload, Mapping):
            raise ValidationError("Timetable must be an object")

        start_date = parse_iso_date(require_non_empty(payload.get("startDate"), "Semester start"))
        end_date = parse_iso_date(require_non_empty(payload.get("endDate"), "Semester end"))
        if end_date < start_date:
            raise ValidationError("Semester end must not be before semester start")

        slots_payload = payload.get("slots") or []
        if not isinstance(slots_payload, list):
            raise ValidationError("Slots must be a list")

        return Timetable(
            start_date=start_date,
            end_date=end_date,
            slots=self.build_slots(slots_payload),
            name=(payload.get("name") or "").strip(),
            section=payload.get("section") or None,
        )
