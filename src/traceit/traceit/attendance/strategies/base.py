from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...settings.model import AttendanceSettings


@dataclass(frozen=True)
class CountDecision:
    """Which counters one occurrence feeds (each by the occurrence's weight).

    `tally` names the display counter ("bunked", "on_leave", "teacher_absent")
    that is bumped regardless of how the percentage is affected.
    """

    attended: bool = False
    counted: bool = False
    tally: Optional[str] = None


EXCLUDED = CountDecision()


class StatusStrategy(ABC):
    """Strategy Pattern: how an effective status turns into counter updates."""

    @abstractmethod
    def decide(self, settings: AttendanceSettings) -> CountDecision:
        raise NotImplementedError
