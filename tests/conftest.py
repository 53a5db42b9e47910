import pytest

from course_planner.store.hash_table import CourseHashTable

SAMPLE_LINES = [
    "CSCI100,Introduction to Computer Science",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI200,Data Structures,CSCI101",
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI301,Advanced Programming in C++,CSCI101",
    "CSCI350,Operating Systems,CSCI300",
    "CSCI400,Large Software Development,CSCI301,CSCI350",
]


@pytest.fixture
def table():
    return CourseHashTable()


@pytest.fixture
def write_course_file(tmp_path):
    def _write(lines, name="courses.csv", newline="\n"):
        path = tmp_path / name
        path.write_text(newline.join(lines) + newline, encoding="utf-8", newline="")
        return path
    return _write


@pytest.fixture
def sample_file(write_course_file):
    return write_course_file(SAMPLE_LINES)
