import streamlit as st

from course_planner.config import load_settings
from course_planner.loader.course_file import load_courses, load_courses_from_bytes
from course_planner.models.course import LoadResult
from course_planner.report.formatters import NOT_FOUND, format_course
from course_planner.report.listing import catalog_frame, search_course
from course_planner.store.hash_table import CourseHashTable


@st.cache_resource
def get_settings():
    return load_settings()


def get_table(capacity: int) -> CourseHashTable:
    # one table per browser session
    if "table" not in st.session_state:
        st.session_state.table = CourseHashTable(capacity)
    return st.session_state.table


def show_result(result: LoadResult):
    if result.ok:
        st.success(f"Data loaded successfully ({result.courses_loaded} courses from {result.source})")
    else:
        where = f" (line {result.line_number})" if result.line_number else ""
        st.error(f"{result.message}{where}")


def main():
    st.set_page_config(page_title="Course Planner", layout="wide")
    st.title("Course Planner")

    settings = get_settings()
    table = get_table(settings.table_capacity)

    col1, col2 = st.columns([2, 1])

    with col2:
        st.subheader("Load courses")
        path = st.text_input("Course file path", value=settings.data_file)
        if st.button("Load from path"):
            show_result(load_courses(table, path))

        uploaded = st.file_uploader("...or upload a course file", type=["csv", "txt"])
        if uploaded is not None and st.button("Load upload"):
            show_result(load_courses_from_bytes(table, uploaded.getvalue(), uploaded.name))

    with col1:
        st.subheader("Course list")
        if table.empty():
            st.info("Please load data first")
        else:
            st.dataframe(catalog_frame(table), hide_index=True)

            course_number = st.text_input("What course do you want to know about?", placeholder="e.g., CSCI300")
            if course_number.strip():
                course = search_course(table, course_number.strip().upper())
                if course is None:
                    st.write(NOT_FOUND)
                else:
                    st.markdown("  \n".join(format_course(course)))


if __name__ == "__main__":
    main()
