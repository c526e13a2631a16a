"""
Soft schedule filters.

A combination is accepted if every enabled check passes. Most checks are
"at least half" rules rather than hard constraints; only the days-off
count and the hybrid delivery mode are exact.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from schedulegen.conflicts import time_to_minutes
from schedulegen.model import CourseMeeting, CourseSection, ScheduleFilters


DELIVERY_MODES = ("any", "online", "inPerson", "hybrid")
TIMES_OF_DAY = ("any", "morning", "afternoon", "evening")
COMPACTNESS = ("any", "compact", "spread")
DAYS_OFF = ("any", "oneDay", "twoDays")

# Hours, [start, end)
TIME_RANGES: dict[str, tuple[int, int]] = {
    "morning": (8, 12),
    "afternoon": (12, 17),
    "evening": (17, 21),
}

SCHOOL_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")

COMPACT_MAX_GAP_HOURS = 2
SPREAD_MIN_GAP_HOURS = 1

DEFAULT_FILTERS = ScheduleFilters()


def _meetings(combination: Iterable[CourseSection]) -> list[CourseMeeting]:
    return [m for section in combination for m in section.meetings]


def _is_in_time_range(hhmm: str, hours: tuple[int, int]) -> bool:
    minutes = time_to_minutes(hhmm)
    return hours[0] * 60 <= minutes < hours[1] * 60


def _gap_hours(end: str, start: str) -> float:
    return (time_to_minutes(start) - time_to_minutes(end)) / 60


def get_active_days(combination: Iterable[CourseSection]) -> set[str]:
    """
    Monday-Friday days with at least one meeting. Weekend meetings are ignored.
    """
    return {m.day for m in _meetings(combination) if m.day in SCHOOL_DAYS}


def _check_days_off(combination: list[CourseSection], days_off: str) -> bool:
    off = len(SCHOOL_DAYS) - len(get_active_days(combination))
    if days_off == "oneDay":
        return off == 1
    if days_off == "twoDays":
        return off == 2
    return True


def _check_delivery_mode(meetings: list[CourseMeeting], mode: str) -> bool:
    total = len(meetings)
    online = sum(1 for m in meetings if m.type == "Online")
    in_person = sum(1 for m in meetings if m.type == "In-person")

    if mode == "online":
        return online >= total / 2
    if mode == "inPerson":
        return in_person >= total / 2
    if mode == "hybrid":
        return online > 0 and in_person > 0
    return True


def _check_time_of_day(meetings: list[CourseMeeting], time_of_day: str) -> bool:
    hours = TIME_RANGES.get(time_of_day)
    if hours is None:
        return True
    in_range = sum(1 for m in meetings if _is_in_time_range(m.time.start_time, hours))
    return in_range >= len(meetings) / 2


def _check_compactness(meetings: list[CourseMeeting], compactness: str) -> bool:
    if compactness not in ("compact", "spread"):
        return True

    by_day: dict[str, list[CourseMeeting]] = defaultdict(list)
    for m in meetings:
        by_day[m.day].append(m)

    valid_days = 0
    multi_days = 0

    for day_meetings in by_day.values():
        if len(day_meetings) < 2:
            continue

        multi_days += 1
        ordered = sorted(day_meetings, key=lambda m: time_to_minutes(m.time.start_time))

        day_ok = True
        for prev, nxt in zip(ordered, ordered[1:]):
            gap = _gap_hours(prev.time.end_time, nxt.time.start_time)
            if compactness == "compact" and gap > COMPACT_MAX_GAP_HOURS:
                day_ok = False
                break
            if compactness == "spread" and gap < SPREAD_MIN_GAP_HOURS:
                day_ok = False
                break
        if day_ok:
            valid_days += 1

    # no day with multiple meetings -> nothing to judge
    if multi_days == 0:
        return True
    return valid_days >= multi_days / 2


def meets_filter_criteria(combination: list[CourseSection], filters: ScheduleFilters) -> bool:
    """
    Return True if the combination passes every enabled filter.

    With filters disabled every combination passes.
    """
    if not filters.is_enabled:
        return True

    meetings = _meetings(combination)

    if filters.days_off != "any" and not _check_days_off(combination, filters.days_off):
        return False
    if filters.delivery_mode != "any" and not _check_delivery_mode(meetings, filters.delivery_mode):
        return False
    if filters.time_of_day != "any" and not _check_time_of_day(meetings, filters.time_of_day):
        return False
    if filters.schedule_compactness != "any" and not _check_compactness(meetings, filters.schedule_compactness):
        return False

    return True
