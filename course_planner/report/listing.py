from typing import List, Optional

import pandas as pd

from course_planner.models.course import Course
from course_planner.report.console import console
from course_planner.report.formatters import (
    LIST_HEADER,
    NO_COURSES,
    NOT_FOUND,
    format_course,
    format_course_line,
)
from course_planner.store.hash_table import CourseHashTable


def search_course(table: CourseHashTable, course_number: str) -> Optional[Course]:
    # exact match; callers normalize case before asking
    return table.search(course_number)


def selection_sort_courses(courses: List[Course]) -> List[Course]:
    """Sort in place by course number (plain string order) and return the same list."""
    n = len(courses)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if courses[j].course_number < courses[min_index].course_number:
                min_index = j
        if min_index != i:
            courses[i], courses[min_index] = courses[min_index], courses[i]
    return courses


def sorted_course_list(table: CourseHashTable) -> List[Course]:
    return selection_sort_courses(table.get_all())


def print_sorted_course_list(table: CourseHashTable) -> None:
    if table.empty():
        console.print(NO_COURSES)
        return

    console.print(LIST_HEADER)
    console.print()
    for course in sorted_course_list(table):
        console.print(format_course_line(course), markup=False)


def print_course(table: CourseHashTable, course_number: str) -> None:
    course = search_course(table, course_number)
    if course is None:
        console.print(NOT_FOUND)
        return
    for line in format_course(course):
        console.print(line, markup=False)


def catalog_frame(table: CourseHashTable) -> pd.DataFrame:
    rows = [
        {
            "course_number": c.course_number,
            "course_name": c.course_name,
            "prerequisites": ", ".join(c.prerequisites),
        }
        for c in sorted_course_list(table)
    ]
    return pd.DataFrame(rows, columns=["course_number", "course_name", "prerequisites"])
