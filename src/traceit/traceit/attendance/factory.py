from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import AttendanceStatus
from ..settings.model import AttendanceSettings
from .strategies.base import StatusStrategy
from .strategies.policy_strategy import MassBunkStrategy, TeacherAbsentStrategy
from .strategies.simple_strategies import AbsentStrategy, AttendedStrategy, HolidayStrategy


def _default_strategies() -> dict[AttendanceStatus, StatusStrategy]:
    return {
        AttendanceStatus.ATTENDED: AttendedStrategy(),
        AttendanceStatus.ABSENT: AbsentStrategy(),
        AttendanceStatus.HOLIDAY: HolidayStrategy(),
        AttendanceStatus.BUNK: MassBunkStrategy(),
        AttendanceStatus.TEACHER_ABSENT: TeacherAbsentStrategy(),
    }


@dataclass
class StatusStrategyFactory:
    """Factory Pattern: resolve the effective status, then pick its strategy."""

    strategies: dict[AttendanceStatus, StatusStrategy] = field(default_factory=_default_strategies)

    @staticmethod
    def effective_status(recorded: Optional[AttendanceStatus], settings: AttendanceSettings) -> AttendanceStatus:
        """An occurred-but-unmarked class is never neutral: it defaults to
        absent, or to attended in inverted mode."""
        if recorded is not None:
            return AttendanceStatus(recorded)
        return AttendanceStatus.ATTENDED if settings.inverted_mode else AttendanceStatus.ABSENT

    def for_status(self, status: AttendanceStatus) -> StatusStrategy:
        return self.strategies[AttendanceStatus(status)]
