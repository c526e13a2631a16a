"""
Small builders shared by the test modules.
"""

from schedulegen.model import CourseMeeting, CourseSection, CourseTime

HEADER = (
    "CourseName,Subject,CourseCode,FirstMeetingDay,FirstMeetingTime,FirstMeetingType,"
    "SecondMeetingDay,SecondMeetingTime,SecondMeetingType,CRN"
)


def meeting(day: str, start: str, end: str, kind: str = "In-person") -> CourseMeeting:
    return CourseMeeting(day=day, time=CourseTime(start_time=start, end_time=end), type=kind)


def section(subject: str, code: str, crn: str, first: CourseMeeting, second: CourseMeeting) -> CourseSection:
    return CourseSection(
        course_name=f"{subject} {code}",
        subject=subject,
        course_code=code,
        crn=crn,
        meetings=(first, second),
    )
