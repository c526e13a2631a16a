"""
Terminal rendering with rich.

- courses table (subject -> course codes with section counts)
- weekly timetable of one generated combination
"""

from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from schedulegen.conflicts import time_to_minutes
from schedulegen.model import CourseMeeting, CourseSection, ScheduleCombination, WEEKDAYS
from schedulegen.parse import extract_unique_courses, get_course_sections

console = Console()

WORK_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


def _meeting_line(section: CourseSection, meeting: CourseMeeting) -> str:
    mode = "[green]Online[/]" if meeting.type == "Online" else "[cyan]In-person[/]"
    return (
        f"{meeting.time.start_time}-{meeting.time.end_time} "
        f"[bold]{section.subject} {section.course_code}[/] ({section.crn}) {mode}"
    )


def courses_table(sections: list[CourseSection]) -> Table:
    """
    One row per course, grouped by subject (subjects and codes sorted).
    """
    unique = extract_unique_courses(sections)

    table = Table(title="Courses", box=box.SIMPLE)
    table.add_column("Subject")
    table.add_column("Code")
    table.add_column("Name")
    table.add_column("Sections", justify="right")

    for subject in unique["subjects"]:
        for code in unique["courses_by_subject"][subject]:
            course_sections = get_course_sections(sections, subject, code)
            table.add_row(f"[bold cyan]{subject}[/]", code, course_sections[0].course_name, str(len(course_sections)))
    return table


def timetable_table(combination: ScheduleCombination, title: Optional[str] = None) -> Table:
    """
    Weekly grid, one column per day, meetings sorted by start time.

    Saturday/Sunday columns only appear if the combination meets on them.
    """
    buckets: dict[str, list[tuple[CourseSection, CourseMeeting]]] = {day: [] for day in WEEKDAYS}
    for section in combination.sections:
        for meeting in section.meetings:
            buckets[meeting.day].append((section, meeting))

    days = [d for d in WEEKDAYS if d in WORK_WEEK or buckets[d]]

    table = Table(title=title, box=box.SIMPLE)
    for day in days:
        table.add_column(day[:3])
        buckets[day].sort(key=lambda pair: time_to_minutes(pair[1].time.start_time))

    max_len = max((len(buckets[d]) for d in days), default=0)
    for r in range(max_len):
        row = []
        for day in days:
            row.append(_meeting_line(*buckets[day][r]) if r < len(buckets[day]) else "")
        table.add_row(*row)
    return table


def print_courses(sections: list[CourseSection]) -> None:
    console.print(courses_table(sections))


def print_timetable(combination: ScheduleCombination, title: Optional[str] = None) -> None:
    console.print(timetable_table(combination, title=title))
