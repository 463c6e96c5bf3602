"""
In-memory workbook — a CalculationEngine backed by pandas DataFrames.

Holds values only. "Formulas" are plain Python callables registered against
a region name; recalculate() runs the callables registered for that region
and nothing else, the same way a manual-calculation host only refreshes the
range it is asked to. Used to exercise the sweeps without a live Excel host,
and as the target of workbook.loader.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional, Sequence, Set, Tuple

import numpy as np
import pandas as pd

from core.errors import EngineFailure, SchemaMismatch, SweepError, WorkbookError
from core.schema import CALCULATION_MODES
from core.utils import is_a1_address, offset_cell

from .base import CalculationEngine, ClearScope, Region

logger = logging.getLogger(__name__)

Calculator = Callable[["InMemoryWorkbook"], None]

BLANK = ""


@dataclass
class _Table:
    sheet: str
    frame: pd.DataFrame


class InMemoryWorkbook(CalculationEngine):
    def __init__(self) -> None:
        self._tables: Dict[str, _Table] = {}
        self._cells: Dict[Tuple[str, str], Any] = {}
        self._calculators: Dict[Tuple[str, str], List[Calculator]] = {}
        self._filters: Set[Tuple[str, str]] = set()
        self.calculation_mode: str = "automatic"
        self.mode_history: List[str] = []
        self.calc_log: List[Region] = []

    # ------------------------------------------------------------------
    # setup helpers
    # ------------------------------------------------------------------
    def add_table(
        self,
        sheet: str,
        name: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]] = (),
    ) -> None:
        frame = pd.DataFrame([list(r) for r in rows], columns=list(columns), dtype=object)
        self._tables[name] = _Table(sheet=sheet, frame=frame)

    def set_value(self, sheet: str, name: str, value: Any) -> None:
        self._cells[(sheet, name)] = value

    def on_calculate(self, sheet: str, name: str, calculator: Calculator) -> None:
        """Register a calculator run whenever the region named `name` is recalculated."""
        self._calculators.setdefault((sheet, name), []).append(calculator)

    def apply_filter(self, sheet: str, table: Optional[str] = None) -> None:
        self._filters.add((sheet, table or ""))

    def has_filters(self, sheet: str) -> bool:
        return any(s == sheet for s, _ in self._filters)

    def table_frame(self, table: str) -> pd.DataFrame:
        return self._table(table).frame.copy()

    @property
    def table_names(self) -> List[str]:
        return list(self._tables)

    # ------------------------------------------------------------------
    # CalculationEngine
    # ------------------------------------------------------------------
    def read_value(self, sheet: str, name: str) -> Any:
        try:
            return self._cells[(sheet, name)]
        except KeyError:
            if is_a1_address(name):
                return BLANK
            raise WorkbookError(f"No named range {sheet}!{name}") from None

    def write_scratch_inputs(self, sheet: str, name: str, values: Any) -> None:
        if isinstance(values, (list, tuple)) and is_a1_address(name):
            for j, v in enumerate(values):
                self._cells[(sheet, offset_cell(name, cols=j))] = v
            return
        if isinstance(values, (list, tuple)):
            values = list(values)
        self._cells[(sheet, name)] = values

    def recalculate(self, region: Region) -> None:
        self.calc_log.append(region)
        for calculator in self._calculators.get((region.sheet, region.name), []):
            try:
                calculator(self)
            except SweepError:
                raise
            except Exception as exc:
                raise EngineFailure(region, f"Recalculation failed for {region}: {exc}") from exc

    def clear_region(self, region: Region, scope: ClearScope = ClearScope.ALL) -> None:
        if scope == ClearScope.FORMATS:
            # values only; nothing to do for formats
            return

        if region.kind == "table_body":
            frame = self._table(region.name).frame
            frame.loc[:, :] = BLANK
            return

        if is_a1_address(region.name):
            for i in range(region.height):
                for j in range(region.width):
                    key = (region.sheet, offset_cell(region.name, rows=i, cols=j))
                    if key in self._cells:
                        self._cells[key] = BLANK
            return

        key = (region.sheet, region.name)
        current = self._cells.get(key)
        if isinstance(current, list):
            self._cells[key] = [BLANK] * len(current)
        elif key in self._cells:
            self._cells[key] = BLANK

    def table_row_count(self, table: str) -> int:
        return len(self._table(table).frame)

    def table_column_count(self, table: str) -> int:
        return self._table(table).frame.shape[1]

    def read_table_rows(
        self, table: str, start: int = 0, height: Optional[int] = None
    ) -> List[List[Any]]:
        frame = self._table(table).frame
        if height is None:
            height = len(frame) - start
        if start < 0 or height < 0 or start + height > len(frame):
            raise WorkbookError(
                f"Rows [{start}, {start + height}) are outside {table} ({len(frame)} rows)."
            )
        return frame.iloc[start:start + height].values.tolist()

    def write_table_rows(self, table: str, start: int, rows: Sequence[Sequence[Any]]) -> None:
        frame = self._table(table).frame
        width = frame.shape[1]
        for row in rows:
            if len(row) != width:
                raise SchemaMismatch(
                    f"Row of width {len(row)} does not fit {table} ({width} columns)."
                )
        if start < 0 or start + len(rows) > len(frame):
            raise WorkbookError(
                f"Rows [{start}, {start + len(rows)}) are outside {table} ({len(frame)} rows)."
            )
        if not rows:
            return
        frame.iloc[start:start + len(rows), :] = np.asarray([list(r) for r in rows], dtype=object)

    def append_table_rows(self, table: str, rows: Sequence[Sequence[Any]]) -> None:
        t = self._table(table)
        width = t.frame.shape[1]
        if any(len(r) != width for r in rows):
            raise SchemaMismatch(f"Appended rows do not fit {table} ({width} columns).")
        extra = pd.DataFrame([list(r) for r in rows], columns=t.frame.columns, dtype=object)
        t.frame = pd.concat([t.frame, extra], ignore_index=True)
        logger.debug("%s grown to %d rows", table, len(t.frame))

    def remove_filters(self, sheet: str) -> None:
        self._filters = {(s, t) for s, t in self._filters if s != sheet}

    def set_calculation_mode(self, mode: Literal["manual", "automatic"]) -> None:
        if mode not in CALCULATION_MODES:
            raise ValueError(f"Unknown calculation mode: {mode!r}")
        self.calculation_mode = mode
        self.mode_history.append(mode)

    # ------------------------------------------------------------------
    def _table(self, table: str) -> _Table:
        try:
            return self._tables[table]
        except KeyError:
            raise WorkbookError(f"No table named {table!r}") from None
