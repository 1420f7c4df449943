"""Semester-wide projections: how many classes remain and how many can be missed."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import SlotKind
from ..settings.model import AttendanceSettings
from .model import AttendanceSummary, KindStats, SubjectStats


@dataclass(frozen=True)
class Projection:
    total_in_semester: int
    conducted: int
    attended: int
    remaining: int
    target_classes: int
    minimum_needed: int
    can_miss: int

    def to_dict(self) -> dict:
        return {
            "totalInSemester": self.total_in_semester,
            "conducted": self.conducted,
            "attended": self.attended,
            "remaining": self.remaining,
            "targetClasses": self.target_classes,
            "minimumNeeded": self.minimum_needed,
            "canMiss": self.can_miss,
        }


@dataclass(frozen=True)
class SubjectProjection:
    code: str
    name: str
    overall: Projection
    lab: Optional[Projection] = None
    lecture: Optional[Projection] = None

    def to_dict(self) -> dict:
        data = {"code": self.code, "name": self.name, **self.overall.to_dict()}
        if self.lab is not None:
            data["lab"] = self.lab.to_dict()
        if self.lecture is not None:
            data["lecture"] = self.lecture.to_dict()
        return data


@dataclass(frozen=True)
class ProjectionReport:
    target_percentage: float
    overall: Projection
    subjects: tuple[SubjectProjection, ...]

    def to_dict(self) -> dict:
        return {
            "targetPercentage": self.target_percentage,
            "overall": self.overall.to_dict(),
            "subjects": [s.to_dict() for s in self.subjects],
        }


def target_classes(target_percentage: float, total_in_semester: int) -> int:
    """Classes that must be attended to reach the target, rounded up."""
    # Decimal keeps e.g. 70% of 10 at exactly 7 instead of 7.000000000000001.
    needed = Decimal(str(target_percentage)) * total_in_semester / 100
    return max(0, math.ceil(needed))


def project(attended: int, conducted: int, total_in_semester: int, target_percentage: float) -> Projection:
    remaining = max(0, total_in_semester - conducted)
    goal = target_classes(target_percentage, total_in_semester)
    minimum_needed = max(0, goal - attended)
    return Projection(
        total_in_semester=total_in_semester,
        conducted=conducted,
        attended=attended,
        remaining=remaining,
        target_classes=goal,
        minimum_needed=minimum_needed,
        can_miss=max(0, remaining - minimum_needed),
    )


def _kind_projection(stats: Optional[KindStats], semester_total: int, target: float) -> Optional[Projection]:
    if stats is None and semester_total <= 0:
        return None
    attended = stats.attended if stats else 0
    conducted = stats.total if stats else 0
    return project(attended, conducted, semester_total, target)


def project_subject(subject: SubjectStats, semester_totals: Counter, target: float) -> SubjectProjection:
    lab_total = semester_totals.get((subject.code, SlotKind.LAB), 0)
    lecture_total = semester_totals.get((subject.code, SlotKind.LECTURE), 0)
    return SubjectProjection(
        code=subject.code,
        name=subject.name,
        overall=project(subject.attended, subject.total, lab_total + lecture_total, target),
        lab=_kind_projection(subject.lab, lab_total, target),
        lecture=_kind_projection(subject.lecture, lecture_total, target),
    )


def project_summary(summary: AttendanceSummary, semester_totals: Counter, settings: AttendanceSettings) -> ProjectionReport:
    """Projections for every subject plus an overall one.

    `semester_totals` must come from enumerating the whole semester (see
    occurrences.count_occurrences) with the same timetable as `summary`.
    The overall projection leaves labs out under the same rule as the
    overall percentage.
    """
    target = settings.target_percentage
    subjects = tuple(project_subject(s, semester_totals, target) for s in summary.subjects)

    attended = conducted = in_semester = 0
    for sp in subjects:
        part = sp.overall if settings.include_labs_in_overall else sp.lecture
        if part is None:
            continue
        attended += part.attended
        conducted += part.conducted
        in_semester += part.total_in_semester

    return ProjectionReport(
        target_percentage=target,
        overall=project(attended, conducted, in_semester, target),
        subjects=subjects,
    )
