"""
Parsing (CSV text -> validated course sections).

- Validates the exact header row
- Validates every data row independently
- Invalid rows are skipped and reported as "Line N: ..." errors
- The result is only valid if no row failed

Important rules (DO NOT CHANGE):
- 1 CSV row = 1 section with exactly two meetings
- No quoting / escaping of embedded commas
"""

from __future__ import annotations

import re

from pathlib import Path

from typing import Dict, List

from schedulegen.model import (
    MEETING_TYPES,
    WEEKDAYS,
    CourseMeeting,
    CourseSection,
    CourseTime,
    ValidationResult,
)


EXPECTED_HEADER = (
    "CourseName,Subject,CourseCode,"
    "FirstMeetingDay,FirstMeetingTime,FirstMeetingType,"
    "SecondMeetingDay,SecondMeetingTime,SecondMeetingType,"
    "CRN"
)

FIELD_COUNT = 10

_TIME_RANGE_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d-([01]\d|2[0-3]):[0-5]\d$")
_CRN_RE = re.compile(r"^\d{5}$")
_COURSE_CODE_RE = re.compile(r"^\d{3}$")


# ---------------------------------------------------------------------------
# Field validators
# ---------------------------------------------------------------------------


def is_valid_time_format(value: str) -> bool:
    """
    Check 'HH:MM-HH:MM' with the end strictly after the start.
    """
    if not _TIME_RANGE_RE.match(value):
        return False

    start, end = value.split("-")
    start_h, start_m = (int(x) for x in start.split(":"))
    end_h, end_m = (int(x) for x in end.split(":"))

    return end_h * 60 + end_m > start_h * 60 + start_m


def is_valid_day(day: str) -> bool:
    # case-sensitive on purpose: "monday" is rejected
    return day in WEEKDAYS


def is_valid_meeting_type(value: str) -> bool:
    return value in MEETING_TYPES


def parse_time_string(value: str) -> CourseTime:
    start, end = value.split("-")
    return CourseTime(start_time=start, end_time=end)


# ---------------------------------------------------------------------------
# Row parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def _validate_row(fields: List[str], seen_crns: set[str]) -> str | None:
    """
    Return the first problem found in a 10-field row, or None if it is valid.

    A well-formed CRN is registered in seen_crns as a side effect.
    """
    (
        course_name,
        subject,
        course_code,
        first_day,
        first_time,
        first_type,
        second_day,
        second_time,
        second_type,
        crn,
    ) = fields

    if not course_name or not subject or not course_code or not crn:
        return "Missing required fields"

    if crn in seen_crns:
        return f"Duplicate CRN {crn}"
    if not _CRN_RE.match(crn):
        return f"Invalid CRN format {crn}"
    seen_crns.add(crn)

    if not _COURSE_CODE_RE.match(course_code):
        return f"Invalid course code format {course_code}"

    if not is_valid_day(first_day):
        return f"Invalid first meeting day {first_day}"
    if not is_valid_day(second_day):
        return f"Invalid second meeting day {second_day}"

    if not is_valid_time_format(first_time):
        return f"Invalid first meeting time format {first_time}"
    if not is_valid_time_format(second_time):
        return f"Invalid second meeting time format {second_time}"

    if not is_valid_meeting_type(first_type):
        return f"Invalid first meeting type {first_type}"
    if not is_valid_meeting_type(second_type):
        return f"Invalid second meeting type {second_type}"

    return None


def _build_section(fields: List[str]) -> CourseSection:
    (
        course_name,
        subject,
        course_code,
        first_day,
        first_time,
        first_type,
        second_day,
        second_time,
        second_type,
        crn,
    ) = fields

    return CourseSection(
        course_name=course_name,
        subject=subject,
        course_code=course_code,
        crn=crn,
        meetings=(
            CourseMeeting(day=first_day, time=parse_time_string(first_time), type=first_type),
            CourseMeeting(day=second_day, time=parse_time_string(second_time), type=second_type),
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_course_csv(csv_content: str) -> ValidationResult:
    """
    Parse and validate CSV text describing course sections.

    Never raises: every problem ends up in result.errors.
    """
    result = ValidationResult()

    try:
        # Trim lines and drop empty ones; line numbers refer to this list
        lines = [line.strip() for line in csv_content.split("\n")]
        lines = [line for line in lines if line]

        header = lines[0] if lines else ""
        if header != EXPECTED_HEADER:
            result.errors.append("Invalid CSV header format")
            result.is_valid = False
            return result

        sections: List[CourseSection] = []
        seen_crns: set[str] = set()

        for i, line in enumerate(lines[1:], start=2):
            fields = line.split(",")

            if len(fields) != FIELD_COUNT:
                result.errors.append(f"Line {i}: Invalid number of fields")
                continue

            problem = _validate_row(fields, seen_crns)
            if problem:
                result.errors.append(f"Line {i}: {problem}")
                continue

            sections.append(_build_section(fields))

        result.is_valid = not result.errors
        result.data = sections if result.is_valid else None

    except Exception as exc:
        result.is_valid = False
        result.errors.append(f"Parsing error: {exc}")
        result.data = None

    return result


def read_course_file(path: str | Path) -> ValidationResult:
    """
    Read a UTF-8 CSV file and parse it.
    A leading byte-order mark (Excel "CSV UTF-8") is dropped.

    I/O errors (OSError, UnicodeDecodeError) are left to the caller.
    """
    text = Path(path).read_text(encoding="utf-8-sig")
    return parse_course_csv(text)


def extract_unique_courses(sections: List[CourseSection]) -> Dict[str, object]:
    """
    Collect the subjects and, per subject, the course codes offered.

    Both lists are sorted.
    """
    codes_by_subject: Dict[str, set[str]] = {}
    for s in sections:
        codes_by_subject.setdefault(s.subject, set()).add(s.course_code)

    return {
        "subjects": sorted(codes_by_subject),
        "courses_by_subject": {subject: sorted(codes) for subject, codes in codes_by_subject.items()},
    }


def get_course_sections(sections: List[CourseSection], subject: str, course_code: str) -> List[CourseSection]:
    return [s for s in sections if s.subject == subject and s.course_code == course_code]
