from datetime import date, time

import pytest

from src.traceit.traceit.core.enums import SlotKind
from src.traceit.traceit.core.exceptions import ValidationError
from src.traceit.traceit.timetable.service import TimetableService


def _payload(**overrides):
    data = {
        "id": "s1",
        "day": 0,
        "startTime": "09:00",
        "endTime": "10:00",
        "subject": "MC102",
        "subjectName": "Discrete Mathematics",
    }
    data.update(overrides)
    return data


def test_build_slot_from_stored_field_names():
    slot = TimetableService().build_slot(_payload(type="lab", rowSpan=3, startTime="13:00:00", endTime="16:00:00"))

    assert slot.subject_code == "MC102"
    assert slot.kind == SlotKind.LAB
    assert slot.span == 3
    assert slot.start_time == time(13, 0)
    assert slot.weight == 1


def test_build_slot_defaults_to_one_hour_lecture():
    slot = TimetableService().build_slot(_payload(subject=None, subjectCode="CS101", subjectName=""))

    assert slot.kind == SlotKind.LECTURE
    assert slot.span == 1
    assert slot.weight == 1
    assert slot.display_name == "CS101"


@pytest.mark.parametrize(
    "overrides",
    [
        {"day": 5},
        {"day": -1},
        {"day": True},
        {"span": 0},
        {"rowSpan": -2},
        {"type": "seminar"},
        {"startTime": "9am"},
        {"endTime": "08:00"},
        {"subject": "  "},
        {"id": None},
    ],
)
def test_contract_violations_rejected(overrides):
    with pytest.raises(ValidationError):
        TimetableService().build_slot(_payload(**overrides))


def test_build_timetable():
    timetable = TimetableService().build_timetable(
        {
            "name": "Sem 4",
            "startDate": "2026-01-05",
            "endDate": "2026-05-01",
            "slots": [_payload(), _payload(id="s2", day=2)],
        }
    )

    assert timetable.start_date == date(2026, 1, 5)
    assert timetable.end_date == date(2026, 5, 1)
    assert [s.slot_id for s in timetable.slots] == ["s1", "s2"]


def test_build_timetable_rejects_duplicates_and_bad_range():
    svc = TimetableService()

    with pytest.raises(ValidationError):
        svc.build_timetable({"startDate": "2026-01-05", "endDate": "2026-05-01", "slots": [_payload(), _payload()]})
    with pytest.raises(ValidationError):
        svc.build_timetable({"startDate": "2026-05-01", "endDate": "2026-01-05", "slots": []})
    with pytest.raises(ValidationError):
        svc.build_timetable(None)
