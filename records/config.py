"""Environment configuration for record-keeper.

Values are read from the environment each time they're asked for, so a
changed variable takes effect without re-importing. Command-line options
override all of them.

    RECORDS_INVENTORY_FILE  inventory log path      (default: inventory.json)
    RECORDS_STUDENTS_FILE   grade input file        (default: students.txt)
    RECORDS_REPORT_FILE     grade report output     (default: report.txt)
"""

import os
from pathlib import Path

DEFAULT_INVENTORY_FILE = "inventory.json"
DEFAULT_STUDENTS_FILE = "students.txt"
DEFAULT_REPORT_FILE = "report.txt"


def _env_path(name: str, default: str) -> Path:
    value = os.environ.get(name, "").strip()
    return Path(value or default)


def get_inventory_file() -> Path:
    """Path of the inventory log file."""
    return _env_path("RECORDS_INVENTORY_FILE", DEFAULT_INVENTORY_FILE)


def get_students_file() -> Path:
    """Path of the student results input file."""
    return _env_path("RECORDS_STUDENTS_FILE", DEFAULT_STUDENTS_FILE)


def get_report_file() -> Path:
    """Path the grade report is written to."""
    return _env_path("RECORDS_REPORT_FILE", DEFAULT_REPORT_FILE)

