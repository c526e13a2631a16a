"""
Schedule generation.

Enumerates every combination of one section per selected course using a
backtracking search. Sections that conflict with what is already placed
are rejected immediately. A course none of whose sections fits is skipped,
so a combination may contain fewer courses than were selected.
"""

from __future__ import annotations

import random
from collections.abc import Collection
from typing import Optional

from schedulegen.conflicts import has_conflict_with_combination
from schedulegen.filters import DEFAULT_FILTERS, meets_filter_criteria
from schedulegen.model import (
    CourseSection,
    ScheduleCombination,
    ScheduleFilters,
    ScheduleGeneratorResult,
    ScheduleStats,
)


def course_id_of(section: CourseSection) -> str:
    return section.course_id


def group_sections_by_course(sections: list[CourseSection]) -> dict[str, list[CourseSection]]:
    """
    Group sections by course id, keeping first-insertion order of the ids.
    """
    grouped: dict[str, list[CourseSection]] = {}
    for s in sections:
        grouped.setdefault(course_id_of(s), []).append(s)
    return grouped


def generate_non_conflicting_schedules(
    all_sections: list[CourseSection],
    selected_course_ids: Collection[str],
    filters: ScheduleFilters = DEFAULT_FILTERS,
    rng: Optional[random.Random] = None,
) -> ScheduleGeneratorResult:
    """
    Build every conflict-free combination for the selected courses.

    Results are ordered by course_count (descending). Ties are shuffled
    with rng, so their relative order is not stable between calls.
    """
    selected = [s for s in all_sections if course_id_of(s) in selected_course_ids]

    sections_by_course = group_sections_by_course(selected)
    course_ids = list(sections_by_course)

    combinations: list[ScheduleCombination] = []
    current: list[CourseSection] = []

    def build(course_index: int) -> None:
        # Base case: every course considered
        if course_index == len(course_ids):
            if meets_filter_criteria(current, filters):
                combinations.append(ScheduleCombination(sections=tuple(current), course_count=len(current)))
            return

        added = False
        for section in sections_by_course[course_ids[course_index]]:
            if has_conflict_with_combination(section, current):
                continue
            current.append(section)
            build(course_index + 1)
            current.pop()
            added = True

        # No section of this course fits: skip the course
        if not added:
            build(course_index + 1)

    build(0)

    # Shuffle, then stable sort: ties end up in random order
    (rng or random).shuffle(combinations)
    combinations.sort(key=lambda c: c.course_count, reverse=True)

    return ScheduleGeneratorResult(
        combinations=combinations,
        stats=ScheduleStats(total_combinations=len(combinations), courses_included=course_ids),
    )


def format_schedule_combination(combination: ScheduleCombination) -> str:
    """
    One line per section, e.g. "CPRG 305 (CRN: 30922)".
    """
    return "\n".join(f"{s.subject} {s.course_code} (CRN: {s.crn})" for s in combination.sections)
