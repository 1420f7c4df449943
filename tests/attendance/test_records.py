from datetime import date

import pytest

from src.traceit.traceit.attendance.records import (
    AttendanceRecord,
    build_record_map,
    format_record_key,
    parse_record_key,
    record_key,
)
from src.traceit.traceit.core.enums import AttendanceStatus
from src.traceit.traceit.core.exceptions import ValidationError


def test_legacy_key_with_dashes_in_slot_id():
    assert parse_record_key("2026-01-05-9f1c-44aa") == (date(2026, 1, 5), "9f1c-44aa")
    assert format_record_key((date(2026, 1, 5), "9f1c-44aa")) == "2026-01-05-9f1c-44aa"


@pytest.mark.parametrize("key", ["2026-01-05", "2026-01-05_s1", "05-01-2026-s1", "2026-13-01-s1"])
def test_malformed_legacy_keys_rejected(key):
    with pytest.raises(ValidationError):
        parse_record_key(key)


def test_build_from_record_dicts_last_one_wins():
    records = build_record_map(
        [
            {"date": "2026-01-05", "slotId": "s1", "status": "absent"},
            {"date": "2026-01-05", "slotId": "s1", "status": "attended"},
            {"date": "2026-01-06", "slotId": "s2", "status": "teacher_absent"},
        ]
    )

    assert records == {
        (date(2026, 1, 5), "s1"): AttendanceStatus.ATTENDED,
        (date(2026, 1, 6), "s2"): AttendanceStatus.TEACHER_ABSENT,
    }


def test_build_from_legacy_mapping_and_objects():
    from_mapping = build_record_map({"2026-01-05-s1": "bunk"})
    from_objects = build_record_map([AttendanceRecord(date(2026, 1, 5), "s1", AttendanceStatus.BUNK)])

    assert from_mapping == from_objects == {record_key(date(2026, 1, 5), "s1"): AttendanceStatus.BUNK}


def test_empty_records():
    assert build_record_map(None) == {}
    assert build_record_map([]) == {}


@pytest.mark.parametrize(
    "records",
    [
        [{"date": "2026-01-05", "slotId": "s1", "status": "late"}],
        [{"date": "2026-01-05", "status": "attended"}],
        ["2026-01-05-s1"],
        "2026-01-05-s1",
    ],
)
def test_invalid_records_rejected(records):
    with pytest.raises(ValidationError):
        build_record_map(records)
