from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional

from ..common.validators import require_bool, require_choice, require_number_in_range
from ..core.enums import CountPolicy
from ..core.exceptions import ValidationError
from .model import AttendanceSettings

# payload key -> (field name, parser)
_FIELDS = {
    "targetPercentage": ("target_percentage", lambda v: require_number_in_range(v, "Target percentage", 0, 100)),
    "countMassBunkAs": ("mass_bunk_policy", lambda v: require_choice(v, "Mass bunk policy", CountPolicy)),
    "countTeacherAbsentAs": ("teacher_absent_policy", lambda v: require_choice(v, "Teacher absent policy", CountPolicy)),
    "includeLabsInOverall": ("include_labs_in_overall", lambda v: require_bool(v, "Include labs in overall")),
    "invertedMode": ("inverted_mode", lambda v: require_bool(v, "Inverted mode")),
    "showAnalytics": ("show_analytics", lambda v: require_bool(v, "Show analytics")),
}


class SettingsService:
    def __init__(self, *, default_target_percentage: Optional[float] = None):
        defaults = AttendanceSettings()
        if default_target_percentage is not None:
            defaults = replace(
                defaults,
                target_percentage=require_number_in_range(default_target_percentage, "Target percentage", 0, 100),
            )
        self._defaults = defaults

    @property
    def defaults(self) -> AttendanceSettings:
        return self._defaults

    def merge(self, payload: Optional[Mapping[str, Any]], *, base: Optional[AttendanceSettings] = None) -> AttendanceSettings:
        """Partial update: keys that are missing or null keep the base value."""
        current = base or self._defaults
        if payload is None:
            return current
        if not isinstance(payload, Mapping):
            raise ValidationError("Settings must be an object")

        changes = {}
        for key, (field_name, parse) in _FIELDS.items():
            value = payload.get(key)
            if value is not None:
                changes[field_name] = parse(value)
        return replace(current, **changes)
