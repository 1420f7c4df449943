from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.constants import DEFAULT_TARGET_PERCENTAGE
from ..core.enums import CountPolicy


@dataclass(frozen=True)
class AttendanceSettings:
    """Snapshot of the user's counting rules for one aggregation call."""

    target_percentage: float = DEFAULT_TARGET_PERCENTAGE
    mass_bunk_policy: CountPolicy = CountPolicy.ABSENT
    teacher_absent_policy: CountPolicy = CountPolicy.ATTENDED
    include_labs_in_overall: bool = True
    inverted_mode: bool = False
    show_analytics: bool = True

    def to_dict(self) -> dict:
        data = asdict(self)
        return {
            "targetPercentage": data["target_percentage"],
            "countMassBunkAs": self.mass_bunk_policy.value,
            "countTeacherAbsentAs": self.teacher_absent_policy.value,
            "includeLabsInOverall": data["include_labs_in_overall"],
            "invertedMode": data["inverted_mode"],
            "showAnalytics": data["show_analytics"],
        }
