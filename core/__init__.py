"""
Core package — configuration, workbook schema constants, errors and shared utilities.
No sweep logic lives here.
"""

from .config import BaseLayout, InputLayout, RiderLayout, SweepConfig
from .errors import (
    EngineFailure,
    SchemaMismatch,
    SummaryWindowError,
    SweepError,
    WorkbookError,
)
from .schema import PRODUCT_SCENARIO_AXES, RIDER_RISK_CLASSES, RISK_TYPES
from .utils import is_blank, offset_cell, valid_prefix_length

__all__ = [
    "BaseLayout",
    "InputLayout",
    "RiderLayout",
    "SweepConfig",
    "EngineFailure",
    "SchemaMismatch",
    "SummaryWindowError",
    "SweepError",
    "WorkbookError",
    "PRODUCT_SCENARIO_AXES",
    "RIDER_RISK_CLASSES",
    "RISK_TYPES",
    "is_blank",
    "offset_cell",
    "valid_prefix_length",
]
