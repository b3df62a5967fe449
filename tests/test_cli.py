"""Unit tests for interfaces/cli.py.

Tests verify:
1. CLI commands execute without errors
2. Output format is correct
3. Error handling works properly
"""

import json

import pytest

from recordkeeper.interfaces.cli import main


@pytest.fixture(autouse=True)
def in_tmp_dir(tmp_path, monkeypatch):
    """Run every CLI test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCliBasic:
    """Basic CLI tests."""

    def test_version(self, capsys):
        """--version should show version."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0

    def test_help(self, capsys):
        """No command should show help."""
        result = main([])
        assert result == 0
        assert "warehouse" in capsys.readouterr().out

    def test_invalid_command(self):
        """Invalid command should fail."""
        with pytest.raises(SystemExit):
            main(["invalid_command"])


class TestWarehouseCommand:
    """Tests for warehouse command."""

    def test_warehouse_runs(self, capsys):
        assert main(["warehouse"]) == 0
        out = capsys.readouterr().out
        assert "Electronic - ID: 1, Name: Laptop" in out
        assert "Expected error:" in out
        assert "New quantity: 15" in out


class TestInventoryCommand:
    """Tests for inventory command."""

    def test_inventory_runs(self, capsys, in_tmp_dir):
        assert main(["inventory"]) == 0
        out = capsys.readouterr().out
        assert "Data successfully loaded" in out
        saved = json.loads((in_tmp_dir / "data" / "inventory.json").read_text(encoding="utf-8"))
        assert [r["name"] for r in saved][:2] == ["Laptop", "Mouse"]

    def test_inventory_custom_file(self, in_tmp_dir):
        target = in_tmp_dir / "custom" / "inv.json"
        assert main(["inventory", "--file", str(target)]) == 0
        assert target.exists()

    def test_inventory_unwritable_file(self, capsys, in_tmp_dir):
        """A path under a regular file cannot be written."""
        blocker = in_tmp_dir / "blocker"
        blocker.write_text("x", encoding="utf-8")
        result = main(["inventory", "--file", str(blocker / "inv.json")])
        assert result == 1
        assert "A critical error occurred" in capsys.readouterr().out


class TestHealthCommand:
    """Tests for health command."""

    def test_health_runs(self, capsys):
        assert main(["health", "--patient", "2"]) == 0
        assert "Prescriptions for Jane Smith:" in capsys.readouterr().out

    def test_health_unknown_patient(self, capsys):
        assert main(["health", "--patient", "9"]) == 0
        assert "No patient found with ID: 9" in capsys.readouterr().out


class TestGradesCommand:
    """Tests for grades command."""

    def test_grades_creates_sample(self, capsys, in_tmp_dir):
        assert main(["grades"]) == 0
        out = capsys.readouterr().out
        assert "Creating sample input file..." in out
        assert "Grade distribution:" in out
        assert "  A: 2" in out
        assert (in_tmp_dir / "data" / "grades_report.txt").exists()

    def test_grades_with_exports(self, in_tmp_dir):
        assert main(["grades", "--formats", "csv,parquet"]) == 0
        reports = in_tmp_dir / "data" / "reports"
        assert (reports / "grades_report.csv").exists()
        assert (reports / "grades_report.parquet").exists()

    def test_grades_invalid_score(self, capsys, in_tmp_dir):
        bad = in_tmp_dir / "bad.txt"
        bad.write_text("101,John Smith,85\n102,Alice Johnson,abc\n", encoding="utf-8")
        assert main(["grades", "-i", str(bad), "-o", str(in_tmp_dir / "r.txt")]) == 1
        assert "Line 2: Invalid score format: abc" in capsys.readouterr().out

    def test_grades_missing_field(self, capsys, in_tmp_dir):
        bad = in_tmp_dir / "bad.txt"
        bad.write_text("101,John Smith\n", encoding="utf-8")
        assert main(["grades", "-i", str(bad)]) == 1
        assert "Expected 3 fields" in capsys.readouterr().out

    def test_grades_duplicate_id(self, capsys, in_tmp_dir):
        bad = in_tmp_dir / "dup.txt"
        bad.write_text("101,John Smith,85\n101,Jane Doe,60\n", encoding="utf-8")
        assert main(["grades", "-i", str(bad)]) == 1
        assert "already exists" in capsys.readouterr().out

    def test_grades_unknown_format(self, capsys):
        assert main(["grades", "--formats", "pdf"]) == 1
        assert "Unknown format" in capsys.readouterr().out


class TestFinanceCommand:
    """Tests for finance command."""

    def test_finance_runs(self, capsys):
        assert main(["finance", "--summary"]) == 0
        out = capsys.readouterr().out
        assert "Final balance: $350.00" in out
        assert "Totals by category:" in out
        assert "Entertainment" in out


class TestAllCommand:
    """Tests for all command."""

    def test_all_runs(self, capsys):
        assert main(["all"]) == 0
        out = capsys.readouterr().out
        for title in (
            "Warehouse Inventory Management System",
            "Inventory Management System",
            "Healthcare System",
            "School Grading System",
            "Finance Management System",
        ):
            assert title in out
