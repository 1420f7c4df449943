from datetime import date, datetime, time

from src.traceit.traceit.attendance.model import SubjectStats
from src.traceit.traceit.attendance.records import record_key
from src.traceit.traceit.attendance.trends import (
    DayCount,
    best_subject,
    daily_counts,
    heatmap,
    semester_timeline,
    weekly_trend,
    worst_subject,
)
from src.traceit.traceit.core.enums import AttendanceStatus, CountPolicy
from src.traceit.traceit.settings.model import AttendanceSettings
from src.traceit.traceit.timetable.model import Slot


def _slot(slot_id, day, start, span=1):
    return Slot(
        slot_id=slot_id,
        day=day,
        start_time=start,
        end_time=time(start.hour + span, 0),
        subject_code="CS101",
        span=span,
    )


def _subject(code, pct):
    return SubjectStats(code=code, name=code, attended=0, total=0, bunked=0, on_leave=0, teacher_absent=0, percentage=pct)


def test_daily_counts_apply_weights_and_policies():
    slots = [_slot("a", 0, time(9, 0), span=2), _slot("b", 0, time(14, 0))]
    records = {
        record_key(date(2026, 1, 5), "a"): AttendanceStatus.ATTENDED,
        record_key(date(2026, 1, 5), "b"): AttendanceStatus.BUNK,
    }
    settings = AttendanceSettings(mass_bunk_policy=CountPolicy.EXCLUDE)

    days = daily_counts(slots, records, date(2026, 1, 5), date(2026, 1, 30), settings, datetime(2026, 1, 12, 10, 0))

    assert days == [
        DayCount(day=date(2026, 1, 5), attended=2, total=2),
        DayCount(day=date(2026, 1, 12), attended=0, total=2),
    ]


def test_weekly_trend_groups_by_monday():
    days = [
        DayCount(day=date(2026, 1, 5), attended=1, total=1),
        DayCount(day=date(2026, 1, 7), attended=1, total=2),
        DayCount(day=date(2026, 1, 13), attended=0, total=0),
    ]

    trend = weekly_trend(days)

    assert [(p.week_start, p.attended, p.total, p.percentage) for p in trend] == [
        (date(2026, 1, 5), 2, 3, 66.67),
        (date(2026, 1, 12), 0, 0, 0),
    ]


def test_heatmap_reports_dominant_status():
    slots = [_slot("a", 0, time(9, 0), span=2), _slot("b", 0, time(14, 0)), _slot("c", 1, time(9, 0))]
    records = {
        record_key(date(2026, 1, 5), "b"): AttendanceStatus.ATTENDED,
        record_key(date(2026, 1, 6), "c"): AttendanceStatus.HOLIDAY,
    }

    cells = heatmap(slots, records, date(2026, 1, 5), date(2026, 1, 6), AttendanceSettings(), datetime(2026, 1, 7, 0, 0))

    # Unmarked two-hour "a" outweighs the attended one-hour "b".
    assert [(c.day, c.status) for c in cells] == [
        (date(2026, 1, 5), AttendanceStatus.ABSENT),
        (date(2026, 1, 6), AttendanceStatus.HOLIDAY),
    ]


def test_semester_timeline_midway():
    timeline = semester_timeline(date(2026, 1, 1), date(2026, 1, 31), date(2026, 1, 16))

    assert timeline.total_days == 30
    assert timeline.days_elapsed == 15
    assert timeline.days_remaining == 15
    assert timeline.progress == 50
    assert timeline.weeks_remaining == 2


def test_semester_timeline_clamps_outside_range():
    before = semester_timeline(date(2026, 1, 1), date(2026, 1, 31), date(2025, 12, 1))
    after = semester_timeline(date(2026, 1, 1), date(2026, 1, 31), date(2026, 3, 1))
    empty = semester_timeline(date(2026, 1, 1), date(2026, 1, 1), date(2026, 1, 1))

    assert before.days_elapsed == 0 and before.progress == 0
    assert after.days_remaining == 0 and after.progress == 100 and after.weeks_remaining == 0
    assert empty.progress == 0


def test_best_and_worst_subject():
    subjects = [_subject("A", 80.0), _subject("B", 55.5), _subject("C", 91.2)]

    assert best_subject(subjects).code == "C"
    assert worst_subject(subjects).code == "B"
    assert best_subject([]) is None


def test_weeks_remaining_counts_whole_weeks_only():
    assert semester_timeline(date(2026, 1, 1), date(2026, 1, 31), date(2026, 1, 18)).weeks_remaining == 1
    assert semester_timeline(date(2026, 1, 1), date(2026, 1, 31), date(2026, 1, 24)).weeks_remaining == 1
    assert semester_timeline(date(2026, 1, 1), date(2026, 1, 31), date(2026, 1, 25)).weeks_remaining == 0
