"""Command Line Interface for recordkeeper.

Runs the console programs:
- warehouse: Electronics and groceries inventory
- inventory: JSON-persisted inventory
- health: Patients and prescriptions
- grades: Student grading report
- finance: Transactions against a savings account
- all: Every program in turn

Usage:
    python -m recordkeeper warehouse
    python -m recordkeeper inventory [--file PATH]
    python -m recordkeeper grades [--input PATH] [--formats csv,xlsx]
"""

import argparse
import logging
import sys
from pathlib import Path

from recordkeeper import __version__
from recordkeeper.infrastructure import DEFAULT_PATHS, RepositoryError
from recordkeeper.infrastructure.repositories import StudentFileError
from recordkeeper.application import (
    WarehouseManager,
    InventoryApp,
    HealthSystemApp,
    StudentResultProcessor,
    FinanceApp,
)

logger = logging.getLogger(__name__)


def cmd_warehouse(args: argparse.Namespace) -> int:
    """Run the warehouse walkthrough."""
    WarehouseManager().run()
    return 0


def cmd_inventory(args: argparse.Namespace) -> int:
    """Seed, save, clear and reload the JSON inventory."""
    data_file = Path(args.file) if args.file else None
    try:
        InventoryApp(data_file, paths=DEFAULT_PATHS).run()
    except RepositoryError as e:
        print(f"\nA critical error occurred: {e}")
        print("Please check the logs and try again.")
        return 1
    return 0


def cmd_health(args: argparse.Namespace) -> int:
    """Show patients and one patient's prescriptions."""
    HealthSystemApp().run(args.patient)
    return 0


def cmd_grades(args: argparse.Namespace) -> int:
    """Grade students and write the report."""
    input_path = Path(args.input) if args.input else DEFAULT_PATHS.students_file
    output_path = Path(args.output) if args.output else DEFAULT_PATHS.grades_report
    formats = tuple(f for f in args.formats.split(",") if f) if args.formats else ()

    processor = StudentResultProcessor(paths=DEFAULT_PATHS)
    try:
        processor.run(input_path, output_path, formats)
    except FileNotFoundError:
        print(f"Error: Input file not found at {input_path}")
        return 1
    except StudentFileError as e:
        print(f"Error: {e}")
        return 1
    except RepositoryError as e:
        print(f"Error: {e}")
        return 1
    except (OSError, ValueError) as e:
        logger.exception("Grading failed")
        print(f"An unexpected error occurred: {e}")
        return 1
    return 0


def cmd_finance(args: argparse.Namespace) -> int:
    """Process sample transactions."""
    app = FinanceApp()
    app.run()

    if args.summary:
        print("\nTotals by category:")
        for row in app.summarize_by_category().iter_rows(named=True):
            print(f"  {row['category']:<14} {row['total']:>10.2f} ({row['count']})")
    return 0


def cmd_all(args: argparse.Namespace) -> int:
    """Run every program, returning the worst exit code."""
    codes = []
    for command in COMMANDS.values():
        if command is cmd_all:
            continue
        print("\n" + "=" * 60)
        codes.append(command(args))
    return max(codes, default=0)


COMMANDS = {
    "warehouse": cmd_warehouse,
    "inventory": cmd_inventory,
    "health": cmd_health,
    "grades": cmd_grades,
    "finance": cmd_finance,
    "all": cmd_all,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recordkeeper",
        description="recordkeeper - Typed repository console programs",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("warehouse", help="Warehouse inventory walkthrough")

    inventory_parser = subparsers.add_parser("inventory", help="JSON inventory walkthrough")
    inventory_parser.add_argument(
        "--file",
        default=None,
        help="Inventory JSON file (default: data/inventory.json)",
    )

    health_parser = subparsers.add_parser("health", help="Patients and prescriptions")
    health_parser.add_argument(
        "--patient",
        type=int,
        default=1,
        help="Patient id whose prescriptions are shown",
    )

    grades_parser = subparsers.add_parser("grades", help="Student grading report")
    grades_parser.add_argument("-i", "--input", default=None, help="Student results file")
    grades_parser.add_argument("-o", "--output", default=None, help="Text report file")
    grades_parser.add_argument(
        "-f", "--formats",
        default="",
        help="Extra export formats (comma-separated: csv,parquet,xlsx)",
    )

    finance_parser = subparsers.add_parser("finance", help="Savings account transactions")
    finance_parser.add_argument(
        "--summary",
        action="store_true",
        help="Show totals by category",
    )

    all_parser = subparsers.add_parser("all", help="Run every program")
    all_parser.set_defaults(
        file=None, patient=1, input=None, output=None, formats="", summary=False
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
