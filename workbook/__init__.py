"""
Workbook adapters — the calculation engine interface, the in-memory workbook,
.xlsx loading, and the input validation gate.
"""

from .base import CalculationEngine, ClearScope, Region
from .memory import InMemoryWorkbook
from .loader import load_defined_values, load_tables, workbook_from_xlsx
from .validators import ValidationResult, check_withdrawal_rows, validate_input

__all__ = [
    "CalculationEngine",
    "ClearScope",
    "Region",
    "InMemoryWorkbook",
    "load_defined_values",
    "load_tables",
    "workbook_from_xlsx",
    "ValidationResult",
    "check_withdrawal_rows",
    "validate_input",
]
