"""Time-based views over the same counting rules: per day, per week, heatmap."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..settings.model import AttendanceSettings
from ..timetable.model import Slot
from .aggregator import percentage, resolve
from .factory import StatusStrategyFactory
from .model import SubjectStats
from .occurrences import iter_occurred
from .records import RecordMap


@dataclass(frozen=True)
class DayCount:
    day: date
    attended: int
    total: int


@dataclass(frozen=True)
class TrendPoint:
    week_start: date
    attended: int
    total: int
    percentage: float


@dataclass(frozen=True)
class HeatmapCell:
    day: date
    status: AttendanceStatus


@dataclass(frozen=True)
class SemesterTimeline:
    total_days: int
    days_elapsed: int
    days_remaining: int
    progress: float
    weeks_remaining: int


def daily_counts(
    slots: Sequence[Slot],
    records: RecordMap,
    semester_start: date,
    semester_end: date,
    settings: AttendanceSettings,
    now: datetime,
    *,
    factory: Optional[StatusStrategyFactory] = None,
) -> list[DayCount]:
    """Weighted attended/total per class day, chronological."""
    attended: Counter = Counter()
    total: Counter = Counter()
    days: list[date] = []

    occurred = iter_occurred(slots, semester_start, semester_end, now)
    for occurrence, _status, decision in resolve(occurred, records, settings, factory=factory):
        if not days or days[-1] != occurrence.day:
            days.append(occurrence.day)
        weight = occurrence.slot.weight
        if decision.counted:
            total[occurrence.day] += weight
            if decision.attended:
                attended[occurrence.day] += weight

    return [DayCount(day=d, attended=attended[d], total=total[d]) for d in days]


def weekly_trend(days: Iterable[DayCount]) -> list[TrendPoint]:
    """Roll day counts into Monday-anchored weeks."""
    weeks: dict[date, list[int]] = {}
    for d in days:
        monday = d.day - timedelta(days=d.day.weekday())
        bucket = weeks.setdefault(monday, [0, 0])
        bucket[0] += d.attended
        bucket[1] += d.total

    return [
        TrendPoint(week_start=monday, attended=a, total=t, percentage=percentage(a, t))
        for monday, (a, t) in sorted(weeks.items())
    ]


def heatmap(
    slots: Sequence[Slot],
    records: RecordMap,
    semester_start: date,
    semester_end: date,
    settings: AttendanceSettings,
    now: datetime,
    *,
    factory: Optional[StatusStrategyFactory] = None,
) -> list[HeatmapCell]:
    """Dominant effective status per class day (by weight; ties follow
    AttendanceStatus declaration order)."""
    weights: dict[date, Counter] = {}
    occurred = iter_occurred(slots, semester_start, semester_end, now)
    for occurrence, status, _decision in resolve(occurred, records, settings, factory=factory):
        weights.setdefault(occurrence.day, Counter())[status] += occurrence.slot.weight

    order = list(AttendanceStatus)
    cells = []
    for day, counts in weights.items():
        status = max(order, key=lambda s: (counts.get(s, 0), -order.index(s)))
        cells.append(HeatmapCell(day=day, status=status))
    return cells


def semester_timeline(semester_start: date, semester_end: date, today: date) -> SemesterTimeline:
    total_days = (semester_end - semester_start).days
    days_elapsed = max(0, (today - semester_start).days)
    days_remaining = max(0, (semester_end - today).days)
    progress = min(100.0, percentage(days_elapsed, total_days)) if total_days > 0 else 0.0
    return SemesterTimeline(
        total_days=max(0, total_days),
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
        progress=progress,
        weeks_remaining=days_remaining // 7,
    )


def best_subject(subjects: Sequence[SubjectStats]) -> Optional[SubjectStats]:
    best = None
    for s in subjects:
        if best is None or s.percentage > best.percentage:
            best = s
    return best


def worst_subject(subjects: Sequence[SubjectStats]) -> Optional[SubjectStats]:
    worst = None
    for s in subjects:
        if worst is None or s.percentage < worst.percentage:
            worst = s
    return worst
