from pydantic import BaseModel
from typing import List, Literal, Optional

LoadErrorKind = Literal[
    "file_not_found",
    "invalid_format",
    "invalid_prerequisite",
    "table_full",
    "invalid_encoding",
]


class Course(BaseModel):
    course_number: str
    course_name: str
    prerequisites: List[str] = []


class LoadResult(BaseModel):
    ok: bool
    source: str
    courses_loaded: int = 0
    kind: Optional[LoadErrorKind] = None
    message: str = ""
    # 1-based line in the input file, when the failure points at one
    line_number: Optional[int] = None

    @classmethod
    def failure(cls, source: str, kind: LoadErrorKind, message: str, line_number: Optional[int] = None) -> "LoadResult":
        return cls(ok=False, source=source, kind=kind, message=message, line_number=line_number)
