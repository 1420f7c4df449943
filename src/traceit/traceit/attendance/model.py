from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KindStats:
    """Lab-only or lecture-only slice of a subject's counters."""

    attended: int
    total: int
    bunked: int
    on_leave: int
    teacher_absent: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "attended": self.attended,
            "total": self.total,
            "percentage": self.percentage,
            "bunked": self.bunked,
            "leaves": self.on_leave,
            "teacherAbsent": self.teacher_absent,
        }


@dataclass(frozen=True)
class SubjectStats:
    code: str
    name: str
    attended: int
    total: int
    bunked: int
    on_leave: int
    teacher_absent: int
    percentage: float
    lab: Optional[KindStats] = None
    lecture: Optional[KindStats] = None

    def to_dict(self) -> dict:
        data = {
            "code": self.code,
            "name": self.name,
            "percentage": self.percentage,
            "attended": self.attended,
            "total": self.total,
            "bunked": self.bunked,
            "leaves": self.on_leave,
            "teacherAbsent": self.teacher_absent,
        }
        if self.lab is not None:
            data["lab"] = self.lab.to_dict()
        if self.lecture is not None:
            data["lecture"] = self.lecture.to_dict()
        return data


@dataclass(frozen=True)
class AttendanceSummary:
    overall: float
    subjects: tuple[SubjectStats, ...]

    def subject(self, code: str) -> Optional[SubjectStats]:
        for s in self.subjects:
            if s.code == code:
                return s
        return None

    def to_dict(self) -> dict:
        return {"overall": self.overall, "subjects": [s.to_dict() for s in self.subjects]}
