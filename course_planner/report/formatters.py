from typing import List

from course_planner.models.course import Course

NOT_FOUND = "Course not found."
NO_COURSES = "No courses to display"
LIST_HEADER = "Here is a sample schedule:"


def format_course_line(course: Course) -> str:
    # Example output: CSCI200, Data Structures
    return f"{course.course_number}, {course.course_name}"


def format_prerequisites(course: Course) -> str:
    return "Prerequisites: " + ", ".join(course.prerequisites)


def format_course(course: Course) -> List[str]:
    lines = [format_course_line(course)]
    if course.prerequisites:
        lines.append(format_prerequisites(course))
    return lines
