"""Application Services for recordkeeper.

Services orchestrate repository access to implement the console programs.

Available services:
- WarehouseManager: Electronics and groceries inventory
- InventoryApp: JSON-persisted inventory
- HealthSystemApp: Patients and prescriptions
- StudentResultProcessor: Student grading and reports
- FinanceApp: Transactions against a savings account
"""

from recordkeeper.application.services.warehouse import WarehouseManager
from recordkeeper.application.services.inventory import InventoryApp
from recordkeeper.application.services.health import HealthSystemApp
from recordkeeper.application.services.grading import StudentResultProcessor
from recordkeeper.application.services.finance import FinanceApp

__all__ = [
    "WarehouseManager",
    "InventoryApp",
    "HealthSystemApp",
    "StudentResultProcessor",
    "FinanceApp",
]
