"""Configuration: Centralized paths and settings.

This module provides:
- DataPaths: File paths for persisted and generated files
- AppConfig: Parameters for the console programs

Directory Structure:
    data/
    ├── inventory.json           # JSON inventory snapshot
    ├── students.txt             # Grading input (id,name,score)
    ├── grades_report.txt        # Grading text report
    └── reports/                 # Tabular exports
        ├── grades_report.csv
        └── ...
"""

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from recordkeeper.domain.models import DEFAULT_GRADE_BOUNDARIES


@dataclass(frozen=True)
class DataPaths:
    """File paths for data files.

    Attributes:
        root: Project root directory
    """

    root: Path = Path(".")

    # --- Directories ---

    @property
    def data_dir(self) -> Path:
        """Main data directory."""
        return self.root / "data"

    @property
    def reports_dir(self) -> Path:
        """Tabular report exports."""
        return self.data_dir / "reports"

    # --- Files ---

    @property
    def inventory_file(self) -> Path:
        """JSON inventory snapshot."""
        return self.data_dir / "inventory.json"

    @property
    def students_file(self) -> Path:
        """Student results input."""
        return self.data_dir / "students.txt"

    @property
    def grades_report(self) -> Path:
        """Plain-text grade report."""
        return self.data_dir / "grades_report.txt"

    # --- Helper Methods ---

    def report_path(self, base_name: str, fmt: str) -> Path:
        """Path to a tabular export."""
        return self.reports_dir / f"{base_name}.{fmt}"

    def validate(self) -> list[str]:
        """Check which directories are missing.

        Returns:
            List of missing paths (empty if all exist)
        """
        missing = []
        if not self.data_dir.exists():
            missing.append(str(self.data_dir))
        if not self.reports_dir.exists():
            missing.append(str(self.reports_dir))
        return missing

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.reports_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class AppConfig:
    """Configuration for the console programs.

    Attributes:
        milk_expiry_days: Days until seeded milk expires
        bread_expiry_days: Days until seeded bread expires
        eggs_expiry_days: Days until seeded eggs expire
        savings_account_number: Account used by the finance demo
        savings_opening_balance: Opening balance of that account
        currency_symbol: Prefix for printed amounts
        grade_boundaries: (lower bound, letter) pairs, highest first
        max_score: Upper bound for a valid score
        report_formats: Default tabular export formats
    """

    milk_expiry_days: int = 7
    bread_expiry_days: int = 5
    eggs_expiry_days: int = 14
    savings_account_number: str = "SAV001"
    savings_opening_balance: Decimal = Decimal("1000")
    currency_symbol: str = "$"
    grade_boundaries: tuple[tuple[int, str], ...] = DEFAULT_GRADE_BOUNDARIES
    max_score: int = 100
    report_formats: tuple[str, ...] = ("csv",)


# Default instances
DEFAULT_PATHS = DataPaths()
DEFAULT_CONFIG = AppConfig()
