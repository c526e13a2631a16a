"""
Central data model definitions used across the project.

This module defines the canonical structure of sections, filters and
generated combinations so that:
- the parser, the generator and the CLI share the same field names
- sections stay read-only once they leave the parser
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


WEEKDAYS: Tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MEETING_TYPES: Tuple[str, ...] = ("Online", "In-person")


@dataclass(frozen=True)
class CourseTime:
    start_time: str
    end_time: str


@dataclass(frozen=True)
class CourseMeeting:
    day: str
    time: CourseTime
    type: str


@dataclass(frozen=True)
class CourseSection:
    """
    One offered instance of a course, identified by its CRN.

    Every section has exactly two weekly meetings.
    """

    course_name: str
    subject: str
    course_code: str
    crn: str
    meetings: Tuple[CourseMeeting, CourseMeeting]

    @property
    def course_id(self) -> str:
        # e.g. "CPRG305"
        return f"{self.subject}{self.course_code}"


@dataclass
class ValidationResult:
    """
    Outcome of parsing one CSV snapshot.

    data is only set when the whole input was valid.
    """

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    data: Optional[List[CourseSection]] = None


@dataclass(frozen=True)
class ScheduleFilters:
    is_enabled: bool = False
    delivery_mode: str = "any"  # any | online | inPerson | hybrid
    time_of_day: str = "any"  # any | morning | afternoon | evening
    schedule_compactness: str = "any"  # any | compact | spread
    days_off: str = "any"  # any | oneDay | twoDays


@dataclass(frozen=True)
class ScheduleCombination:
    sections: Tuple[CourseSection, ...]
    course_count: int


@dataclass(frozen=True)
class ScheduleStats:
    total_combinations: int
    courses_included: List[str]


@dataclass(frozen=True)
class ScheduleGeneratorResult:
    combinations: List[ScheduleCombination]
    stats: ScheduleStats
