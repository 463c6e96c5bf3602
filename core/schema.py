from __future__ import annotations

from typing import Dict, Tuple

# Product code -> (interest rate levels, premium term modes).
# Products missing from this table have no scenarios to sweep.
PRODUCT_SCENARIO_AXES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "UVL01": (("High", "Low", "Guaranteed"), ("Opted term",)),
    "UVL02": (("High", "Low", "Guaranteed"), ("Opted term",)),
    "UVL03": (("High", "Low", "Guaranteed"), ("Opted term",)),
    "ILP01": (("High", "Low"), ("Must-pay term", "Policy term", "Opted term")),
}

# Base cash flow risk axis (always both).
RISK_TYPES: Tuple[str, ...] = ("Standard", "Subrisk")

# Rider cash flow risk classes, in sweep order.
RIDER_RISK_CLASSES: Tuple[str, ...] = ("Standard", "Sub-standard")

WITHDRAWAL_OUTPUT_COLUMNS: Tuple[str, ...] = ("Year", "Amount")

CALCULATION_MODES: Tuple[str, ...] = ("manual", "automatic")

VALIDATION_FAILED_MESSAGE = "Input validation failed. Please check the input data."
