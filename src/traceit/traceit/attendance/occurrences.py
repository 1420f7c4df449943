"""Occurrence enumeration: turns a weekly slot template into dated meetings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Sequence

from ..core.constants import FIRST_WEEKEND_DAY
from ..core.enums import SlotKind
from ..timetable.model import Slot


@dataclass(frozen=True)
class Occurrence:
    """A single concrete meeting of a slot on a calendar date."""

    day: date
    slot: Slot


def _days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def _slots_by_weekday(slots: Iterable[Slot]) -> dict[int, list[Slot]]:
    by_day: dict[int, list[Slot]] = {}
    for slot in slots:
        if 0 <= slot.day < FIRST_WEEKEND_DAY:
            by_day.setdefault(slot.day, []).append(slot)
    for day_slots in by_day.values():
        # Stable: equal start times keep template order.
        day_slots.sort(key=lambda s: s.start_time)
    return by_day


def iter_occurrences(slots: Sequence[Slot], start: date, end: date) -> Iterator[Occurrence]:
    """Yield (date, slot) meetings for every weekday in [start, end], inclusive.

    Weekends are always skipped, as are slots whose day is not Monday..Friday.
    An empty or inverted range yields nothing.
    """
    by_day = _slots_by_weekday(slots)
    if not by_day:
        return
    for current in _days(start, end):
        weekday = current.weekday()
        if weekday >= FIRST_WEEKEND_DAY:
            continue
        for slot in by_day.get(weekday, ()):
            yield Occurrence(current, slot)


def has_occurred(occurrence: Occurrence, now: datetime) -> bool:
    """True for earlier days, or today once the slot's start time is reached."""
    today = now.date()
    if occurrence.day != today:
        return occurrence.day < today
    return now.time() >= occurrence.slot.start_time


def iter_occurred(slots: Sequence[Slot], start: date, end: date, now: datetime) -> Iterator[Occurrence]:
    """Occurrences in range that have already happened as of `now`."""
    last = min(end, now.date())
    for occurrence in iter_occurrences(slots, start, last):
        if has_occurred(occurrence, now):
            yield occurrence


def count_occurrences(slots: Sequence[Slot], start: date, end: date) -> Counter:
    """Weighted occurrence totals keyed by (subject_code, kind), whether or not
    the meetings have happened yet."""
    totals: Counter = Counter()
    for occurrence in iter_occurrences(slots, start, end):
        slot = occurrence.slot
        totals[(slot.subject_code, SlotKind(slot.kind))] += slot.weight
    return totals
