"""
Conflict detection.

Two sections conflict if any of their meetings fall on the same weekday
and the time intervals overlap.
Overlap rule (half-open intervals):
    max(start_a, start_b) < min(end_a, end_b)
Touching endpoints (end == start) are NOT a conflict.
"""

from __future__ import annotations

from typing import Iterable

from schedulegen.model import CourseSection


def time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h * 60 + m


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return max(a_start, b_start) < min(a_end, b_end)


def has_time_conflict(section_a: CourseSection, section_b: CourseSection) -> bool:
    """
    Return True if any meeting of section_a overlaps any meeting of section_b.
    """
    for m1 in section_a.meetings:
        for m2 in section_b.meetings:
            if m1.day != m2.day:
                continue
            if _overlaps(
                time_to_minutes(m1.time.start_time),
                time_to_minutes(m1.time.end_time),
                time_to_minutes(m2.time.start_time),
                time_to_minutes(m2.time.end_time),
            ):
                return True
    return False


def has_conflict_with_combination(section: CourseSection, current: Iterable[CourseSection]) -> bool:
    return any(has_time_conflict(section, existing) for existing in current)


def find_conflicts(sections: list[CourseSection]) -> list[tuple[CourseSection, CourseSection]]:
    """
    Find conflicting section pairs (A,B), each pair appears once (i<j).
    """
    conflicts: list[tuple[CourseSection, CourseSection]] = []

    # O(n^2) is fine for typical course lists
    for i in range(len(sections)):
        for j in range(i + 1, len(sections)):
            if has_time_conflict(sections[i], sections[j]):
                conflicts.append((sections[i], sections[j]))

    return conflicts
