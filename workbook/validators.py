"""
Input validation gate run before any sweep.

The workbook computes the actual validation itself into the named boolean
`input_validation`; this module only reads that gate, reports failure in the
Input sheet status block, and adds a few informational warnings about rows
the sweeps will silently skip.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence

from core.config import SweepConfig
from core.schema import VALIDATION_FAILED_MESSAGE
from core.utils import as_year, is_blank, valid_prefix_length

from .base import CalculationEngine, ClearScope, Region


@dataclass
class ValidationResult:
    """Collects validation errors (blocking) and warnings (informational)."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  - {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  - {w}")
        if not lines:
            lines.append("All checks passed.")
        return "\n".join(lines)


def check_withdrawal_rows(rows: Sequence[Sequence[Any]], result: ValidationResult) -> None:
    """Warn about withdrawal rows that expand to nothing or are never read."""
    n_valid = valid_prefix_length(rows)

    for i, row in enumerate(rows[:n_valid]):
        start, end = as_year(row[0]), as_year(row[1])
        if start is None or end is None:
            which = "start" if start is None else "end"
            result.warnings.append(
                f"Withdrawal row {i + 1}: {which} year is blank or not a number; "
                f"it expands to no years."
            )
        elif end < start:
            result.warnings.append(
                f"Withdrawal row {i + 1}: end year {end} is before start year {start}; "
                f"it expands to no years."
            )

    trailing = [i for i, row in enumerate(rows[n_valid:], start=n_valid)
                if any(not is_blank(v) for v in row)]
    if trailing:
        result.warnings.append(
            f"{len(trailing)} withdrawal rows after the first empty row are ignored "
            f"(first at row {trailing[0] + 1})."
        )


def validate_input(engine: CalculationEngine, config: SweepConfig) -> ValidationResult:
    """
    Read the workbook's validation gate.

    On failure the Input status block is cleared and the failure message is
    written to its anchor cell.
    """
    layout = config.input
    result = ValidationResult()

    gate = engine.read_value(layout.sheet, layout.validation_range)
    if not bool(gate) or (isinstance(gate, str) and gate.strip().upper() == "FALSE"):
        result.errors.append(VALIDATION_FAILED_MESSAGE)
        engine.clear_region(
            Region.range(layout.sheet, layout.status_cell, height=3), ClearScope.CONTENTS
        )
        engine.write_scratch_inputs(layout.sheet, layout.status_cell, VALIDATION_FAILED_MESSAGE)
        return result

    check_withdrawal_rows(engine.read_table_rows(layout.withdrawal_table), result)
    return result
