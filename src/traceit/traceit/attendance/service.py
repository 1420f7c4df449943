from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import format_iso_date, now_local
from ..settings.model import AttendanceSettings
from ..timetable.model import Timetable
from .aggregator import compute_attendance
from .factory import StatusStrategyFactory
from .model import AttendanceSummary
from .occurrences import count_occurrences
from .projections import ProjectionReport, project_summary
from .records import RecordMap
from .trends import (
    HeatmapCell,
    SemesterTimeline,
    TrendPoint,
    best_subject,
    daily_counts,
    heatmap,
    semester_timeline,
    weekly_trend,
    worst_subject,
)


@dataclass(frozen=True)
class AttendanceReport:
    """Everything the dashboard needs, computed against a single `now`."""

    generated_at: datetime
    summary: AttendanceSummary
    projections: ProjectionReport
    weekly: list[TrendPoint]
    heatmap_cells: list[HeatmapCell]
    timeline: SemesterTimeline

    def to_dict(self) -> dict:
        best = best_subject(self.summary.subjects)
        worst = worst_subject(self.summary.subjects)
        return {
            "generatedAt": self.generated_at.isoformat(timespec="minutes"),
            **self.summary.to_dict(),
            "projections": self.projections.to_dict(),
            "weeklyTrend": [
                {
                    "date": format_iso_date(p.week_start),
                    "attended": p.attended,
                    "total": p.total,
                    "percentage": p.percentage,
                }
                for p in self.weekly
            ],
            "heatmapData": [{"date": format_iso_date(c.day), "status": c.status.value} for c in self.heatmap_cells],
            "timeline": {
                "totalDays": self.timeline.total_days,
                "daysElapsed": self.timeline.days_elapsed,
                "daysRemaining": self.timeline.days_remaining,
                "progress": self.timeline.progress,
                "weeksRemaining": self.timeline.weeks_remaining,
            },
            "bestSubject": best.code if best else None,
            "worstSubject": worst.code if worst else None,
        }


class AttendanceStatsService:
    """Entry point for callers; the only place the clock is read."""

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = now_local,
        strategy_factory: Optional[StatusStrategyFactory] = None,
    ):
        self._clock = clock
        self._factory = strategy_factory or StatusStrategyFactory()

    def summarize(
        self,
        timetable: Timetable,
        records: RecordMap,
        settings: AttendanceSettings,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceSummary:
        now = now or self._clock()
        return compute_attendance(
            timetable.slots,
            records,
            timetable.start_date,
            timetable.end_date,
            settings,
            now,
            factory=self._factory,
        )

    def project(
        self,
        timetable: Timetable,
        records: RecordMap,
        settings: AttendanceSettings,
        *,
        now: Optional[datetime] = None,
    ) -> ProjectionReport:
        now = now or self._clock()
        summary = self.summarize(timetable, records, settings, now=now)
        semester_totals = count_occurrences(timetable.slots, timetable.start_date, timetable.end_date)
        return project_summary(summary, semester_totals, settings)

    def build_report(
        self,
        timetable: Timetable,
        records: RecordMap,
        settings: AttendanceSettings,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceReport:
        now = now or self._clock()
        args = (timetable.slots, records, timetable.start_date, timetable.end_date, settings, now)

        summary = compute_attendance(*args, factory=self._factory)
        semester_totals = count_occurrences(timetable.slots, timetable.start_date, timetable.end_date)
        days = daily_counts(*args, factory=self._factory)

        return AttendanceReport(
            generated_at=now,
            summary=summary,
            projections=project_summary(summary, semester_totals, settings),
            weekly=weekly_trend(days),
            heatmap_cells=heatmap(*args, factory=self._factory),
            timeline=semester_timeline(timetable.start_date, timetable.end_date, now.date()),
        )
