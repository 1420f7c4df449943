from __future__ import annotations

from typing import Callable

from ...core.enums import CountPolicy
from ...settings.model import AttendanceSettings
from .base import CountDecision, StatusStrategy


class PolicyStrategy(StatusStrategy):
    """Mass bunk / teacher absence: percentage impact follows a user policy.

    The display tally is always incremented; only the attended/total effect
    depends on the policy.
    """

    def __init__(self, *, tally: str, policy_of: Callable[[AttendanceSettings], CountPolicy]):
        self._tally = tally
        self._policy_of = policy_of

    def decide(self, settings: AttendanceSettings) -> CountDecision:
        policy = CountPolicy(self._policy_of(settings))
        if policy == CountPolicy.ATTENDED:
            return CountDecision(attended=True, counted=True, tally=self._tally)
        if policy == CountPolicy.ABSENT:
            return CountDecision(counted=True, tally=self._tally)
        return CountDecision(tally=self._tally)


class MassBunkStrategy(PolicyStrategy):
    def __init__(self) -> None:
        super().__init__(tally="bunked", policy_of=lambda s: s.mass_bunk_policy)


class TeacherAbsentStrategy(PolicyStrategy):
    def __init__(self) -> None:
        super().__init__(tally="teacher_absent", policy_of=lambda s: s.teacher_absent_policy)
