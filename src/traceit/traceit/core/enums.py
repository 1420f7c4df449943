from __future__ import annotations

from enum import Enum


class SlotKind(str, Enum):
    """Loại tiết học: lab luôn tính 1 buổi, lecture tính theo số giờ."""

    LECTURE = "lecture"
    LAB = "lab"


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh của một buổi học cụ thể."""

    ATTENDED = "attended"
    ABSENT = "absent"
    BUNK = "bunk"
    TEACHER_ABSENT = "teacher_absent"
    HOLIDAY = "holiday"


class CountPolicy(str, Enum):
    """Cách tính các trạng thái đặc biệt (bỏ học tập thể, giảng viên vắng)."""

    ATTENDED = "attended"
    ABSENT = "absent"
    EXCLUDE = "exclude"
