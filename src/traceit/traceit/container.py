from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import StatusStrategyFactory
from .attendance.service import AttendanceStatsService
from .settings.service import SettingsService
from .timetable.service import TimetableService


@dataclass(frozen=True)
class Container:
    timetable_service: TimetableService
    settings_service: SettingsService
    attendance_service: AttendanceStatsService


def build_container(*, default_target_percentage: Optional[float] = None) -> Container:
    return Container(
        timetable_service=TimetableService(),
        settings_service=SettingsService(default_target_percentage=default_target_percentage),
        attendance_service=AttendanceStatsService(strategy_factory=StatusStrategyFactory()),
    )
