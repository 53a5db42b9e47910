import logging

from rich.logging import RichHandler
from rich.markup import escape

from course_planner.config import Settings, load_settings
from course_planner.loader.course_file import load_courses
from course_planner.report.console import console
from course_planner.report.listing import print_course, print_sorted_course_list
from course_planner.store.hash_table import CourseHashTable

logger = logging.getLogger(__name__)

MENU = """
1. Load Data Structure.
2. Print Course List.
3. Print Course.
9. Exit
"""

LOAD_FIRST = "Please load data first"
FAREWELL = "Thank you for using the course planner!"


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _load(table: CourseHashTable, settings: Settings) -> None:
    filename = _ask("Enter filename: ") or settings.data_file
    result = load_courses(table, filename)
    if result.ok:
        console.print(f"Data loaded successfully ({result.courses_loaded} courses)")
    else:
        where = f" (line {result.line_number})" if result.line_number else ""
        console.print(f"[red]{escape(result.message)}[/red]{where}")


def run_shell(table: CourseHashTable, settings: Settings) -> None:
    console.print("Welcome to the course planner.")
    while True:
        console.print(MENU)
        try:
            choice = _ask("What would you like to do? ")
            try:
                option = int(choice)
            except ValueError:
                option = None

            if option == 1:
                _load(table, settings)
            elif option == 2:
                if table.empty():
                    console.print(LOAD_FIRST)
                else:
                    print_sorted_course_list(table)
            elif option == 3:
                if table.empty():
                    console.print(LOAD_FIRST)
                else:
                    course_number = _ask("What course do you want to know about? ").upper()
                    print_course(table, course_number)
            elif option == 9:
                break
            else:
                console.print(f"{choice} is not a valid option.", markup=False)
        except EOFError:
            # end of input at any prompt behaves like option 9
            break
    console.print(FAREWELL)


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    logger.info("Course table capacity: %d", settings.table_capacity)

    table = CourseHashTable(settings.table_capacity)
    run_shell(table, settings)


if __name__ == "__main__":
    main()
