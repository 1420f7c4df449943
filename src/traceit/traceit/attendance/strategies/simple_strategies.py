from __future__ import annotations

from ...settings.model import AttendanceSettings
from .base import EXCLUDED, CountDecision, StatusStrategy


class AttendedStrategy(StatusStrategy):
    def decide(self, settings: AttendanceSettings) -> CountDecision:
        return CountDecision(attended=True, counted=True)


class AbsentStrategy(StatusStrategy):
    """Counts against the percentage and as a leave."""

    def decide(self, settings: AttendanceSettings) -> CountDecision:
        return CountDecision(counted=True, tally="on_leave")


class HolidayStrategy(StatusStrategy):
    """Holidays touch no counter at all."""

    def decide(self, settings: AttendanceSettings) -> CountDecision:
        return EXCLUDED
