import logging
from typing import List, Optional

from course_planner.models.course import Course

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 17


class TableFullError(RuntimeError):
    """Raised when an insert finds neither a free slot nor a slot with the same course number."""


class CourseHashTable:
    """
    Fixed-capacity course table keyed by course number.

    Collisions are resolved with linear probing. The table never grows;
    inserting a new course number into a full table raises TableFullError.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Table capacity must be at least 1, got {capacity}.")
        self._capacity = capacity
        self._slots: List[Optional[Course]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def _hash(self, key: str) -> int:
        return sum(ord(c) for c in key) % self._capacity

    def insert(self, course: Course) -> None:
        key = course.course_number
        start = self._hash(key)
        index = start
        while self._slots[index] is not None and self._slots[index].course_number != key:
            index = (index + 1) % self._capacity
            if index == start:
                raise TableFullError(
                    f"Cannot insert {key}: all {self._capacity} slots hold other courses."
                )
        if index != start:
            logger.debug("Collision for %s: hashed to slot %d, stored in slot %d", key, start, index)
        # same course number -> replaced in place
        self._slots[index] = course

    def search(self, course_number: str) -> Optional[Course]:
        start = self._hash(course_number)
        index = start
        while self._slots[index] is not None:
            if self._slots[index].course_number == course_number:
                return self._slots[index]
            index = (index + 1) % self._capacity
            if index == start:
                break
        return None

    def get_all(self) -> List[Course]:
        # physical slot order, not insertion order
        return [c for c in self._slots if c is not None]

    def empty(self) -> bool:
        return all(c is None for c in self._slots)

    def clear(self) -> None:
        self._slots = [None] * self._capacity

    def __len__(self) -> int:
        return sum(1 for c in self._slots if c is not None)

    def __contains__(self, course_number: object) -> bool:
        return isinstance(course_number, str) and self.search(course_number) is not None
