"""Grading Service: Student result processing and reports.

Orchestrates the grading run:
1. Create a sample input file when none exists
2. Read and validate students via StudentFileRepository
3. Write the plain-text report
4. Export the graded table to CSV, Parquet or Excel
"""

import logging
from pathlib import Path
from typing import Callable

import polars as pl

from recordkeeper.domain.models import Student
from recordkeeper.infrastructure import (
    AppConfig,
    DataPaths,
    DEFAULT_CONFIG,
    DEFAULT_PATHS,
    StudentFileRepository,
)

logger = logging.getLogger(__name__)


class StudentResultProcessor:
    """Service for reading student results and producing grade reports.

    Example:
        >>> processor = StudentResultProcessor()
        >>> students = processor.read_students_from_file(Path("students.txt"))
        >>> processor.write_report_to_file(students, Path("grades_report.txt"))
        >>> processor.export_report(students, "grades_report", ("csv", "xlsx"))
    """

    REPORT_COLUMNS = ["id", "full_name", "score", "grade"]

    def __init__(
        self,
        paths: DataPaths = DEFAULT_PATHS,
        config: AppConfig = DEFAULT_CONFIG,
        echo: Callable[[str], None] = print,
    ):
        self._paths = paths
        self._config = config
        self._files = StudentFileRepository(config)
        self._echo = echo

    def read_students_from_file(self, path: Path) -> list[Student]:
        """Read and validate students.

        Raises:
            FileNotFoundError: If ``path`` does not exist
            StudentFileError: If a line is malformed
            DuplicateKeyError: If an id repeats
        """
        return self._files.read_students(path)

    def write_report_to_file(self, students: list[Student], path: Path) -> Path:
        return self._files.write_report(students, path)

    def to_frame(self, students: list[Student]) -> pl.DataFrame:
        """Graded students as a DataFrame, sorted by score descending."""
        rows = [
            {
                "id": s.id,
                "full_name": s.full_name,
                "score": s.score,
                "grade": self._files.grade(s),
            }
            for s in students
        ]
        schema = {"id": pl.Int64, "full_name": pl.Utf8, "score": pl.Int64, "grade": pl.Utf8}
        df = pl.DataFrame(rows, schema=schema)
        return df.sort(["score", "id"], descending=[True, False]).select(self.REPORT_COLUMNS)

    def grade_distribution(self, students: list[Student]) -> pl.DataFrame:
        """Count of students per letter grade."""
        return (
            self.to_frame(students)
            .group_by("grade")
            .agg(pl.len().alias("count"))
            .sort("grade")
        )

    def export_report(
        self,
        students: list[Student],
        base_name: str = "grades_report",
        formats: tuple[str, ...] | None = None,
    ) -> list[Path]:
        """Save the graded table to the given formats.

        Args:
            students: Students to export
            base_name: Base filename without extension
            formats: Output formats (uses config if not provided)

        Returns:
            List of saved file paths

        Raises:
            ValueError: If a format is not csv, parquet or xlsx
        """
        formats = formats or self._config.report_formats
        df = self.to_frame(students)
        missing = self._paths.validate()
        if missing:
            logger.info("Creating data directories: %s", ", ".join(missing))
            self._paths.ensure_dirs()
        saved = []

        for fmt in formats:
            path = self._paths.report_path(base_name, fmt)

            if fmt == "csv":
                df.write_csv(path)
            elif fmt == "parquet":
                df.write_parquet(path)
            elif fmt == "xlsx":
                self._save_excel(df, path)
            else:
                raise ValueError(f"Unknown format: {fmt}")

            logger.info("Exported grade report to %s", path)
            saved.append(path)

        return saved

    def _save_excel(self, df: pl.DataFrame, path: Path) -> None:
        """Save report to Excel with a formatted header row."""
        import xlsxwriter

        workbook = xlsxwriter.Workbook(str(path))
        worksheet = workbook.add_worksheet("Grades")
        header_fmt = workbook.add_format({
            "bold": True,
            "bg_color": "#4472C4",
            "font_color": "white",
            "border": 1,
        })

        for col_idx, col_name in enumerate(df.columns):
            worksheet.write(0, col_idx, col_name, header_fmt)
            worksheet.set_column(col_idx, col_idx, max(len(col_name), 12))

        for row_idx, row in enumerate(df.iter_rows(), 1):
            for col_idx, value in enumerate(row):
                worksheet.write(row_idx, col_idx, value)

        workbook.close()

    def run(
        self,
        input_path: Path | None = None,
        output_path: Path | None = None,
        formats: tuple[str, ...] = (),
    ) -> list[Student]:
        """Read students, write the text report and optional exports."""
        input_path = input_path or self._paths.students_file
        output_path = output_path or self._paths.grades_report

        self._echo("School Grading System\n")
        if not input_path.exists():
            self._echo("Creating sample input file...")
            self._files.write_sample(input_path)
            self._echo(f"Sample input file created at: {input_path}")

        self._echo("Reading student data...")
        students = self.read_students_from_file(input_path)

        self._echo("Generating report...")
        self.write_report_to_file(students, output_path)

        self._echo("Grade distribution:")
        for row in self.grade_distribution(students).iter_rows(named=True):
            self._echo(f"  {row['grade']}: {row['count']}")

        if formats:
            for path in self.export_report(students, output_path.stem, formats):
                self._echo(f"Exported: {path}")

        self._echo(f"\nSuccess! Report generated at: {output_path}")
        return students
