from __future__ import annotations

import pandas as pd

from core.utils import offset_cell
from workbook.base import CalculationEngine, ClearScope, Region


def clear_status(engine: CalculationEngine, sheet: str, anchor: str,
                 *, height: int = 1, width: int = 1) -> None:
    engine.clear_region(Region.range(sheet, anchor, height=height, width=width),
                        ClearScope.CONTENTS)


def print_timestamp(
    engine: CalculationEngine,
    sheet: str,
    anchor: str,
    started: pd.Timestamp,
    finished: pd.Timestamp,
) -> None:
    """Write Started / Finished / Duration into the anchor cell and the two below it."""
    duration = (finished - started).total_seconds()
    engine.write_scratch_inputs(sheet, anchor, f"Started: {started:%Y-%m-%d %H:%M:%S}")
    engine.write_scratch_inputs(sheet, offset_cell(anchor, rows=1),
                                f"Finished: {finished:%Y-%m-%d %H:%M:%S}")
    engine.write_scratch_inputs(sheet, offset_cell(anchor, rows=2),
                                f"Duration: {duration:.2f} seconds")
