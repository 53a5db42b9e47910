import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from course_planner.models.course import Course, LoadResult
from course_planner.store.hash_table import CourseHashTable

logger = logging.getLogger(__name__)

DELIMITER = ","

# (line_number, fields) for every non-blank line
ParsedLine = Tuple[int, List[str]]


def _split_lines(lines: Iterable[str]) -> List[ParsedLine]:
    parsed = []
    for i, raw in enumerate(lines, 1):
        line = raw.lstrip("\ufeff") if i == 1 else raw
        if not line.strip():
            continue
        parsed.append((i, [field.strip() for field in line.split(DELIMITER)]))
    return parsed


def _prereq_fields(fields: List[str]) -> List[str]:
    return [f for f in fields[2:] if f]


def _validate(parsed: List[ParsedLine], source: str, capacity: int) -> Optional[LoadResult]:
    """Two passes: collect course numbers and check the line format, then check every prerequisite."""
    known = set()
    for line_number, fields in parsed:
        if len(fields) < 2 or not fields[0] or not fields[1]:
            return LoadResult.failure(
                source,
                "invalid_format",
                f"Invalid course format: {DELIMITER.join(fields)}",
                line_number,
            )
        if fields[0] in known:
            logger.warning("%s line %d: duplicate course %s replaces the earlier entry", source, line_number, fields[0])
        known.add(fields[0])

    for line_number, fields in parsed:
        for prereq in _prereq_fields(fields):
            if prereq not in known:
                return LoadResult.failure(
                    source,
                    "invalid_prerequisite",
                    f"Invalid prerequisites: {prereq}",
                    line_number,
                )

    if len(known) > capacity:
        return LoadResult.failure(
            source,
            "table_full",
            f"Too many courses: {len(known)} distinct courses, table holds {capacity}",
        )
    return None


def load_courses_from_lines(table: CourseHashTable, lines: Iterable[str], source: str = "<input>") -> LoadResult:
    """
    Validate course lines and, only if they are all valid, replace the table contents.

    On failure the table keeps whatever it held before.
    """
    parsed = _split_lines(lines)
    failure = _validate(parsed, source, table.capacity)
    if failure is not None:
        logger.error("Rejected %s: %s", source, failure.message)
        return failure

    table.clear()
    for _, fields in parsed:
        table.insert(Course(
            course_number=fields[0],
            course_name=fields[1],
            prerequisites=_prereq_fields(fields),
        ))

    count = len(table)
    logger.info("Loaded %d courses from %s", count, source)
    return LoadResult(ok=True, source=source, courses_loaded=count)


def load_courses_from_bytes(table: CourseHashTable, data: bytes, source: str = "<upload>") -> LoadResult:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.error("Could not decode %s as UTF-8: %s", source, e)
        return LoadResult.failure(
            source, "invalid_encoding", f"Error: File is not UTF-8 text (byte {e.start}); save it as UTF-8 and load again"
        )
    return load_courses_from_lines(table, text.splitlines(), source)


def load_courses(table: CourseHashTable, path: Union[str, Path]) -> LoadResult:
    source = str(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        logger.error("Course file not found: %s", source)
        return LoadResult.failure(source, "file_not_found", "Error: File not found")
    except OSError as e:
        logger.error("Could not read %s: %r", source, e)
        return LoadResult.failure(source, "file_not_found", f"Error: Could not read file ({e.strerror or e})")

    logger.info("Reading courses from %s", source)
    return load_courses_from_bytes(table, data, source)
