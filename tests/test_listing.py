import random

from course_planner.loader.course_file import load_courses, load_courses_from_lines
from course_planner.models.course import Course
from course_planner.report.formatters import format_course
from course_planner.report.listing import (
    catalog_frame,
    print_course,
    print_sorted_course_list,
    search_course,
    selection_sort_courses,
    sorted_course_list,
)


def test_selection_sort_orders_by_course_number():
    numbers = ["CSCI300", "MATH201", "CSCI100", "CSCI200", "CSCI101"]
    courses = [Course(course_number=n, course_name=n) for n in numbers]

    result = selection_sort_courses(courses)

    assert result is courses
    assert [c.course_number for c in courses] == sorted(numbers)


def test_selection_sort_handles_empty_and_single():
    assert selection_sort_courses([]) == []
    one = [Course(course_number="A", course_name="Alpha")]
    assert selection_sort_courses(one) == one


def test_sorted_list_is_non_decreasing_for_shuffled_input(table):
    rng = random.Random(7)
    numbers = [f"{rng.choice(['CSCI', 'MATH', 'PHYS'])}{rng.randint(100, 499)}" for _ in range(12)]
    lines = [f"{n},Course {n}" for n in numbers]
    rng.shuffle(lines)
    assert load_courses_from_lines(table, lines).ok

    ordered = [c.course_number for c in sorted_course_list(table)]

    assert ordered == sorted(set(numbers))


def test_format_course_with_and_without_prerequisites():
    plain = Course(course_number="CS101", course_name="Intro to CS")
    advanced = Course(course_number="CS201", course_name="Data Structures", prerequisites=["CS101", "MATH101"])

    assert format_course(plain) == ["CS101, Intro to CS"]
    assert format_course(advanced) == ["CS201, Data Structures", "Prerequisites: CS101, MATH101"]


def test_search_course_miss_returns_none(table, sample_file):
    load_courses(table, sample_file)
    assert search_course(table, "CSCI999") is None
    assert search_course(table, "CSCI200").course_name == "Data Structures"


def test_print_sorted_course_list(table, write_course_file, capsys):
    load_courses(table, write_course_file(["CS201,Data Structures,CS101", "CS101,Intro to CS"]))

    print_sorted_course_list(table)

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Here is a sample schedule:", "", "CS101, Intro to CS", "CS201, Data Structures"]


def test_print_sorted_course_list_empty_table(table, capsys):
    print_sorted_course_list(table)
    assert capsys.readouterr().out.strip() == "No courses to display"


def test_print_course_found_and_missing(table, sample_file, capsys):
    load_courses(table, sample_file)

    print_course(table, "CSCI400")
    print_course(table, "CSCI999")

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "CSCI400, Large Software Development",
        "Prerequisites: CSCI301, CSCI350",
        "Course not found.",
    ]


def test_catalog_frame_is_sorted(table, sample_file):
    load_courses(table, sample_file)

    frame = catalog_frame(table)

    assert list(frame.columns) == ["course_number", "course_name", "prerequisites"]
    assert list(frame["course_number"]) == sorted(frame["course_number"])
    row = frame[frame["course_number"] == "CSCI300"].iloc[0]
    assert row["prerequisites"] == "CSCI200, MATH201"


def test_catalog_frame_empty_table_keeps_columns(table):
    frame = catalog_frame(table)
    assert frame.empty
    assert list(frame.columns) == ["course_number", "course_name", "prerequisites"]


def test_long_lines_are_not_wrapped(table, capsys):
    name = "Advanced Topics in Distributed Systems Engineering for Large Scale Software Architecture"
    prereqs = [f"PRQ{i:03d}" for i in range(12)]
    lines = [f"{p},Prerequisite {p}" for p in prereqs] + [f"CSCI400,{name}," + ",".join(prereqs)]
    assert load_courses_from_lines(table, lines).ok

    print_course(table, "CSCI400")

    out = capsys.readouterr().out.splitlines()
    assert out == [f"CSCI400, {name}", "Prerequisites: " + ", ".join(prereqs)]
    assert len(out[0]) > 80


def test_names_print_verbatim(table, capsys):
    load_courses_from_lines(table, ["CSCI100,Intro :fire: Topics [lab]"])

    print_course(table, "CSCI100")
    print_sorted_course_list(table)

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "CSCI100, Intro :fire: Topics [lab]"
    assert out[-1] == "CSCI100, Intro :fire: Topics [lab]"
