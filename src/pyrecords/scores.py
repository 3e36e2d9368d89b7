"""Score-file parsing and grade reports.

Score files hold one ``id, full name, score`` line per student. Blank
lines are skipped rather than reported as a missing-field error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pyrecords.exceptions import InvalidScoreFormatError, MissingFieldError
from pyrecords.models.grading import Student

_logger = logging.getLogger(__name__)

_FIELD_COUNT = 3


def parse_student_line(line: str, line_number: int) -> Student:
    """Parse one score line into a :class:`Student`."""
    parts = line.split(",")
    if len(parts) != _FIELD_COUNT:
        raise MissingFieldError(
            f"Line {line_number}: Expected {_FIELD_COUNT} fields, found {len(parts)}.",
            line_number=line_number,
        )

    raw_id, full_name, raw_score = (part.strip() for part in parts)
    try:
        student_id = int(raw_id)
    except ValueError as exc:
        raise InvalidScoreFormatError(f"Line {line_number}: Invalid ID format.", line_number=line_number) from exc
    try:
        score = int(raw_score)
    except ValueError as exc:
        raise InvalidScoreFormatError(
            f"Line {line_number}: Score is not a valid integer.",
            line_number=line_number,
        ) from exc

    return Student(id=student_id, full_name=full_name, score=score)


def parse_students(lines: Iterable[str]) -> list[Student]:
    """Parse score lines, skipping blank ones. Line numbers start at 1."""
    students: list[Student] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        students.append(parse_student_line(line.rstrip("\r\n"), line_number))
    return students


def read_students(path: str | Path) -> list[Student]:
    """Read and parse a score file. Raises ``FileNotFoundError`` if missing."""
    with Path(path).open("r", encoding="utf-8") as handle:
        students = parse_students(handle)
    _logger.debug("Read %d students from %s", len(students), path)
    return students


def write_report(students: Iterable[Student], path: str | Path) -> int:
    """Write one report line per student; return the number written."""
    lines = [str(student) for student in students]
    Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    _logger.debug("Wrote %d report lines to %s", len(lines), path)
    return len(lines)
