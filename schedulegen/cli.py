"""
CLI (Command Line Interface).

Quick terminal commands on top of a course CSV file, e.g.:

    schedulegen validate courses.csv
    schedulegen courses courses.csv
    schedulegen conflicts courses.csv --course CPRG305 --course CPSY300
    schedulegen generate courses.csv
    schedulegen generate courses.csv --course CPRG305 --course CPSY300 --days-off twoDays

Note:
- Plain messages are printed as text; tables and timetables use rich
- The CSV is re-read on every command (no persistence between runs)
"""

from __future__ import annotations

import argparse
import random

from schedulegen.conflicts import find_conflicts
from schedulegen.filters import COMPACTNESS, DAYS_OFF, DELIVERY_MODES, TIMES_OF_DAY
from schedulegen.generator import format_schedule_combination, generate_non_conflicting_schedules
from schedulegen.model import CourseSection, ScheduleFilters
from schedulegen.parse import read_course_file
from schedulegen.view import print_courses, print_timetable


def _load_sections(path: str) -> list[CourseSection] | None:
    """
    Read and validate the CSV file.

    CLI behavior: never crash on a missing or broken file.
    Prints the problem and returns None instead.
    """
    try:
        result = read_course_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Could not read file: {path} ({exc})")
        return None

    if not result.is_valid or result.data is None:
        print(f"Invalid course file: {len(result.errors)} error(s)")
        for err in result.errors:
            print(f"- {err}")
        return None

    return result.data


def _resolve_ids(raw: list[str] | None, sections: list[CourseSection]) -> tuple[list[str], list[str]]:
    """
    Match requested course ids against the ids in the file.

    Case and spaces are ignored ("cprg 305" selects "CPRG305").
    Returns (matched ids, unknown requests). Without a request every
    course in the file is selected, in first-seen order.
    """
    known: dict[str, list[str]] = {}
    for s in sections:
        ids = known.setdefault(s.course_id.lower(), [])
        if s.course_id not in ids:
            ids.append(s.course_id)

    if not raw:
        return [cid for ids in known.values() for cid in ids], []

    matched: list[str] = []
    unknown: list[str] = []
    for x in raw:
        key = "".join(x.split()).lower()
        if not key:
            continue
        if key not in known:
            if x not in unknown:
                unknown.append(x)
            continue
        for cid in known[key]:
            if cid not in matched:
                matched.append(cid)
    return matched, unknown


def filters_from_args(args: argparse.Namespace) -> ScheduleFilters:
    """
    Build ScheduleFilters from CLI flags.

    Filters are enabled by --filters or by choosing any option other than "any".
    """
    options = {
        "delivery_mode": args.delivery,
        "time_of_day": args.time_of_day,
        "schedule_compactness": args.compactness,
        "days_off": args.days_off,
    }
    enabled = bool(args.filters) or any(v != "any" for v in options.values())
    return ScheduleFilters(is_enabled=enabled, **options)


def _cmd_validate(args: argparse.Namespace) -> int:
    sections = _load_sections(args.file)
    if sections is None:
        return 1
    print(f"OK: {len(sections)} sections")
    return 0


def _cmd_courses(args: argparse.Namespace) -> int:
    sections = _load_sections(args.file)
    if sections is None:
        return 1
    if not sections:
        print("No sections in file.")
        return 0
    print_courses(sections)
    return 0


def _cmd_conflicts(args: argparse.Namespace) -> int:
    """
    Print all conflicting section pairs (optionally limited to some courses).
    """
    sections = _load_sections(args.file)
    if sections is None:
        return 1

    wanted, unknown = _resolve_ids(args.course, sections)
    for x in unknown:
        print(f"Warning: course '{x}' not found in {args.file} (ignored).")
    sections = [s for s in sections if s.course_id in wanted]

    confs = find_conflicts(sections)
    if not confs:
        print("No conflicts found.")
        return 0

    print(f"Conflicts found: {len(confs)}")
    for a, b in confs:
        print(f"- {a.course_id} (CRN: {a.crn})  <->  {b.course_id} (CRN: {b.crn})")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    sections = _load_sections(args.file)
    if sections is None:
        return 1

    # no --course: every course in the file
    selected, unknown = _resolve_ids(args.course, sections)
    for x in unknown:
        print(f"Warning: course '{x}' not found in {args.file} (ignored).")
    if not selected:
        print("No known courses selected.")
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    results = generate_non_conflicting_schedules(sections, set(selected), filters_from_args(args), rng=rng)

    if not results.combinations:
        print("No valid schedule combinations found")
        return 0

    stats = results.stats
    print(f"Generated {stats.total_combinations} possible schedules")
    print(f"Courses considered: {', '.join(stats.courses_included)}")

    limit = max(args.limit, 0)
    for i, combo in enumerate(results.combinations[:limit], start=1):
        print(f"\n#{i} ({combo.course_count} courses)")
        print(format_schedule_combination(combo))
    if len(results.combinations) > limit:
        print(f"\n... and {len(results.combinations) - limit} more schedules")

    if args.show is not None:
        if not 1 <= args.show <= len(results.combinations):
            print(f"--show must be between 1 and {len(results.combinations)}")
            return 1
        combo = results.combinations[args.show - 1]
        print()
        print_timetable(combo, title=f"Schedule #{args.show}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="schedulegen", description="Course schedule generator")
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate a course CSV file")
    p_validate.add_argument("file", type=str, help="Course CSV file")

    p_courses = sub.add_parser("courses", help="List courses in a CSV file")
    p_courses.add_argument("file", type=str, help="Course CSV file")

    p_conf = sub.add_parser("conflicts", help="Show conflicting sections")
    p_conf.add_argument("file", type=str, help="Course CSV file")
    p_conf.add_argument("--course", action="append", help="Course id (e.g. CPRG305), repeatable")

    p_gen = sub.add_parser("generate", help="Generate conflict-free schedules")
    p_gen.add_argument("file", type=str, help="Course CSV file")
    p_gen.add_argument("--course", action="append", help="Course id (e.g. CPRG305), repeatable; default: all courses")
    p_gen.add_argument("--filters", action="store_true", help="Enable schedule filters")
    p_gen.add_argument("--delivery", choices=DELIVERY_MODES, default="any")
    p_gen.add_argument("--time-of-day", choices=TIMES_OF_DAY, default="any")
    p_gen.add_argument("--compactness", choices=COMPACTNESS, default="any")
    p_gen.add_argument("--days-off", choices=DAYS_OFF, default="any")
    p_gen.add_argument("--limit", type=int, default=10, help="Max schedules to print (default 10)")
    p_gen.add_argument("--seed", type=int, default=None, help="Seed for tie ordering")
    p_gen.add_argument("--show", type=int, default=None, help="Render schedule #N as a weekly timetable")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate":
        raise SystemExit(_cmd_validate(args))
    if args.command == "courses":
        raise SystemExit(_cmd_courses(args))
    if args.command == "conflicts":
        raise SystemExit(_cmd_conflicts(args))
    if args.command == "generate":
        raise SystemExit(_cmd_generate(args))

    raise SystemExit(2)