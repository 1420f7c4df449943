from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from ..core.enums import SlotKind


@dataclass(frozen=True)
class Slot:
    """One recurring weekly class in a timetable.

    `day` is Monday=0 ... Friday=4. For lectures every hour of `span` is a
    countable session; a lab counts once however long it runs.
    """

    slot_id: str
    day: int
    start_time: time
    end_time: time
    subject_code: str
    kind: SlotKind = SlotKind.LECTURE
    span: int = 1
    subject_name: str = ""
    room: Optional[str] = None
    instructor: Optional[str] = None

    @property
    def is_lab(self) -> bool:
        return self.kind == SlotKind.LAB

    @property
    def weight(self) -> int:
        return 1 if self.is_lab else self.span

    @property
    def display_name(self) -> str:
        return self.subject_name or self.subject_code


@dataclass(frozen=True)
class Timetable:
    """A semester's weekly template plus its inclusive date range."""

    start_date: date
    end_date: date
    slots: tuple[Slot, ...] = field(default_factory=tuple)
    name: str = ""
    section: Optional[str] = None
