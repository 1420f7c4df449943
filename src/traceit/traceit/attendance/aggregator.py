"""Attendance aggregation: weighted counting of occurred classes per subject."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Iterator, Optional, Sequence

from ..common.logging import get_logger
from ..core.enums import AttendanceStatus, SlotKind
from ..settings.model import AttendanceSettings
from ..timetable.model import Slot
from .factory import StatusStrategyFactory
from .model import AttendanceSummary, KindStats, SubjectStats
from .occurrences import Occurrence, iter_occurred
from .records import RecordMap, record_key
from .strategies.base import CountDecision

logger = get_logger(__name__)


def percentage(attended: int, total: int) -> float:
    """attended/total as a percentage rounded to 0.01; 0 when total is 0."""
    if total <= 0:
        return 0.0
    # Halves round up, unlike round().
    scaled = (attended / total) * 10000
    return int(scaled + 0.5) / 100


@dataclass
class Counters:
    attended: int = 0
    total: int = 0
    bunked: int = 0
    on_leave: int = 0
    teacher_absent: int = 0

    def apply(self, decision: CountDecision, weight: int) -> None:
        if decision.counted:
            self.total += weight
            if decision.attended:
                self.attended += weight
        if decision.tally:
            setattr(self, decision.tally, getattr(self, decision.tally) + weight)

    def to_kind_stats(self) -> KindStats:
        return KindStats(
            attended=self.attended,
            total=self.total,
            bunked=self.bunked,
            on_leave=self.on_leave,
            teacher_absent=self.teacher_absent,
            percentage=percentage(self.attended, self.total),
        )


@dataclass
class SubjectAccumulator:
    code: str
    name: str
    overall: Counters = field(default_factory=Counters)
    # Only kinds that actually met get an entry.
    by_kind: dict[SlotKind, Counters] = field(default_factory=dict)

    def add(self, kind: SlotKind, decision: CountDecision, weight: int) -> None:
        self.overall.apply(decision, weight)
        self.by_kind.setdefault(SlotKind(kind), Counters()).apply(decision, weight)

    def to_stats(self) -> SubjectStats:
        lab = self.by_kind.get(SlotKind.LAB)
        lecture = self.by_kind.get(SlotKind.LECTURE)
        return SubjectStats(
            code=self.code,
            name=self.name,
            attended=self.overall.attended,
            total=self.overall.total,
            bunked=self.overall.bunked,
            on_leave=self.overall.on_leave,
            teacher_absent=self.overall.teacher_absent,
            percentage=percentage(self.overall.attended, self.overall.total),
            lab=lab.to_kind_stats() if lab is not None else None,
            lecture=lecture.to_kind_stats() if lecture is not None else None,
        )


def _init_subjects(slots: Sequence[Slot]) -> dict[str, SubjectAccumulator]:
    subjects: dict[str, SubjectAccumulator] = {}
    for slot in slots:
        # Codes are case-sensitive: "cs101" and "CS101" are different subjects.
        if slot.subject_code not in subjects:
            subjects[slot.subject_code] = SubjectAccumulator(code=slot.subject_code, name=slot.display_name)
    return subjects


def resolve(
    occurrences: Iterable[Occurrence],
    records: RecordMap,
    settings: AttendanceSettings,
    *,
    factory: Optional[StatusStrategyFactory] = None,
) -> Iterator[tuple[Occurrence, AttendanceStatus, CountDecision]]:
    """Pair each occurrence with its effective status and counter decision."""
    factory = factory or StatusStrategyFactory()
    for occurrence in occurrences:
        recorded = records.get(record_key(occurrence.day, occurrence.slot.slot_id))
        status = factory.effective_status(recorded, settings)
        yield occurrence, status, factory.for_status(status).decide(settings)


def aggregate(
    slots: Sequence[Slot],
    occurrences: Iterable[Occurrence],
    records: RecordMap,
    settings: AttendanceSettings,
    *,
    factory: Optional[StatusStrategyFactory] = None,
) -> list[SubjectStats]:
    """Fold already-occurred occurrences into per-subject statistics."""
    subjects = _init_subjects(slots)

    for occurrence, _status, decision in resolve(occurrences, records, settings, factory=factory):
        slot = occurrence.slot
        acc = subjects.get(slot.subject_code)
        if acc is not None:
            acc.add(slot.kind, decision, slot.weight)

    return [acc.to_stats() for acc in subjects.values()]


def overall_percentage(subjects: Iterable[SubjectStats], settings: AttendanceSettings) -> float:
    attended, total = overall_counts(subjects, settings)
    return percentage(attended, total)


def overall_counts(subjects: Iterable[SubjectStats], settings: AttendanceSettings) -> tuple[int, int]:
    """Summed (attended, total). Without labs only lecture slices count, so a
    subject that never had a lecture drops out entirely."""
    attended = total = 0
    for s in subjects:
        if settings.include_labs_in_overall:
            attended += s.attended
            total += s.total
        elif s.lecture is not None:
            attended += s.lecture.attended
            total += s.lecture.total
    return attended, total


def compute_attendance(
    slots: Sequence[Slot],
    records: RecordMap,
    semester_start: date,
    semester_end: date,
    settings: AttendanceSettings,
    now: datetime,
    *,
    factory: Optional[StatusStrategyFactory] = None,
) -> AttendanceSummary:
    """Overall and per-subject attendance as of `now`.

    Only classes that have started by `now` are counted; unmarked ones fall
    back to the default status (absent, or attended in inverted mode).
    """
    occurred = iter_occurred(slots, semester_start, semester_end, now)
    subjects = aggregate(slots, occurred, records, settings, factory=factory)
    overall = overall_percentage(subjects, settings)

    logger.debug(
        "attendance.computed",
        subjects=len(subjects),
        overall=overall,
        semester_start=semester_start.isoformat(),
        semester_end=semester_end.isoformat(),
        now=now.isoformat(),
    )
    return AttendanceSummary(overall=overall, subjects=tuple(subjects))
