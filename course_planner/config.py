import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel

from course_planner.store.hash_table import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "ABCU_Advising_Program_Input.csv"


class Settings(BaseModel):
    table_capacity: int = DEFAULT_CAPACITY
    data_file: str = DEFAULT_DATA_FILE
    log_level: str = "WARNING"


def _capacity_from_env(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning("Ignoring COURSE_TABLE_CAPACITY=%r; using %d", raw, DEFAULT_CAPACITY)
        return DEFAULT_CAPACITY
    return value


def _log_level_from_env(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring LOG_LEVEL=%r; using WARNING", raw)
        return "WARNING"
    return level


def load_settings() -> Settings:
    load_dotenv()  # .env in the working directory, if any
    return Settings(
        table_capacity=_capacity_from_env(os.getenv("COURSE_TABLE_CAPACITY", str(DEFAULT_CAPACITY))),
        data_file=os.getenv("COURSE_DATA_FILE", DEFAULT_DATA_FILE).strip() or DEFAULT_DATA_FILE,
        log_level=_log_level_from_env(os.getenv("LOG_LEVEL", "WARNING")),
    )
