"""Application Layer: Use cases and service orchestration.

This layer contains:
- services/: One service per console program
  - warehouse.py: Electronics and groceries inventory
  - inventory.py: JSON-persisted inventory
  - health.py: Patients and prescriptions
  - grading.py: Student grading and reports
  - finance.py: Transactions against a savings account
"""

from recordkeeper.application.services import (
    WarehouseManager,
    InventoryApp,
    HealthSystemApp,
    StudentResultProcessor,
    FinanceApp,
)

__all__ = [
    "WarehouseManager",
    "InventoryApp",
    "HealthSystemApp",
    "StudentResultProcessor",
    "FinanceApp",
]
