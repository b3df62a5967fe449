"""Entry point for running recordkeeper as a module.

Usage:
    python -m recordkeeper [-v] [command] [options]

Commands:
    warehouse   Electronics and groceries inventory
    inventory   JSON-persisted inventory
    health      Patients and prescriptions
    grades      Student grading report
    finance     Savings account transactions
    all         Every program in turn

Examples:
    python -m recordkeeper warehouse
    python -m recordkeeper inventory --file /tmp/inventory.json
    python -m recordkeeper grades --formats csv,xlsx
    python -m recordkeeper finance --summary
"""

import sys

from recordkeeper.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
