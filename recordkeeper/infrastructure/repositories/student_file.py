"""Student File Repository: Access to student result text files.

Input format, one student per line:
    id,full name,score

Blank lines are skipped and fields are trimmed. Students are collected
through a TypedRepository so a repeated id is reported as DuplicateKeyError.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

from recordkeeper.domain.models import Student, letter_grade
from recordkeeper.infrastructure.repositories.typed_repo import TypedRepository
from recordkeeper.infrastructure.config import AppConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = (
    "101,John Smith,85",
    "102,Alice Johnson,92",
    "103,Bob Wilson,78",
    "104,Carol Brown,65",
    "105,David Lee,45",
)


class StudentFileError(ValueError):
    """A line of the student file could not be parsed."""

    def __init__(self, message: str, line_number: int):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {message}")


class MissingFieldError(StudentFileError):
    """A line does not have exactly three fields."""


class InvalidScoreFormatError(StudentFileError):
    """An id or score is not an integer, or the score is out of range."""


def parse_student_line(line: str, line_number: int, max_score: int = 100) -> Student:
    """Parse one ``id,name,score`` line.

    Raises:
        MissingFieldError: Wrong number of fields
        InvalidScoreFormatError: Bad id, bad score, or score out of range
    """
    fields = [field.strip() for field in line.split(",")]
    if len(fields) != 3:
        raise MissingFieldError(
            f"Expected 3 fields (ID, Name, Score), but found {len(fields)}",
            line_number,
        )

    raw_id, name, raw_score = fields
    try:
        student_id = int(raw_id)
    except ValueError:
        raise InvalidScoreFormatError(f"Invalid ID format: {raw_id}", line_number) from None
    try:
        score = int(raw_score)
    except ValueError:
        raise InvalidScoreFormatError(f"Invalid score format: {raw_score}", line_number) from None

    if not 0 <= score <= max_score:
        raise InvalidScoreFormatError(
            f"Score must be between 0 and {max_score}: {score}", line_number
        )
    if not name:
        raise MissingFieldError("Name field is empty", line_number)
    if student_id < 0:
        raise InvalidScoreFormatError(f"Invalid ID format: {raw_id}", line_number)

    return Student(id=student_id, full_name=name, score=score)


class StudentFileRepository:
    """Reads student results and writes plain-text grade reports.

    Example:
        >>> files = StudentFileRepository()
        >>> students = files.read_students(Path("data/students.txt"))
        >>> files.write_report(students, Path("data/grades_report.txt"))
    """

    def __init__(self, config: AppConfig = DEFAULT_CONFIG):
        self._config = config

    def read_students(self, path: Path) -> list[Student]:
        """Read all students from ``path``.

        Raises:
            FileNotFoundError: If the file does not exist
            StudentFileError: If a line cannot be parsed
            DuplicateKeyError: If two lines share an id
        """
        repo: TypedRepository[Student] = TypedRepository("students")
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, 1):
                if not line.strip():
                    continue
                repo.add(parse_student_line(line, line_number, self._config.max_score))

        logger.info("Read %d students from %s", len(repo), path)
        return repo.get_all()

    def write_sample(self, path: Path, lines: Iterable[str] = SAMPLE_STUDENTS) -> Path:
        """Write a sample input file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def grade(self, student: Student) -> str:
        """Letter grade using the configured boundaries."""
        return letter_grade(
            student.score, self._config.grade_boundaries, self._config.max_score
        )

    def format_report(
        self,
        students: list[Student],
        generated_at: datetime | None = None,
    ) -> str:
        """Render the plain-text grade report."""
        generated_at = generated_at or datetime.now()
        lines = ["Student Grade Report", "===================", ""]
        for s in students:
            lines.append(
                f"{s.full_name} (ID: {s.id}): Score = {s.score}, Grade = {self.grade(s)}"
            )
        lines.append("")
        lines.append(f"Total Students Processed: {len(students)}")
        lines.append(f"Report Generated: {generated_at:%Y-%m-%d %H:%M:%S}")
        return "\n".join(lines) + "\n"

    def write_report(
        self,
        students: list[Student],
        path: Path,
        generated_at: datetime | None = None,
    ) -> Path:
        """Write the plain-text grade report to ``path``."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.format_report(students, generated_at), encoding="utf-8")
        return path
