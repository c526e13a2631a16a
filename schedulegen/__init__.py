"""
schedulegen: conflict-free course schedule combinations from a CSV of sections.
"""

from schedulegen.conflicts import has_time_conflict
from schedulegen.filters import DEFAULT_FILTERS, meets_filter_criteria
from schedulegen.generator import format_schedule_combination, generate_non_conflicting_schedules
from schedulegen.parse import parse_course_csv

__all__ = [
    "DEFAULT_FILTERS",
    "format_schedule_combination",
    "generate_non_conflicting_schedules",
    "has_time_conflict",
    "meets_filter_criteria",
    "parse_course_csv",
]
