"""
Exceptions raised by the sweep core and the workbook adapters.

Nothing here is retried: every error terminates the run and is left to the
caller to report.
"""

from __future__ import annotations


class SweepError(Exception):
    """Base class for all sweep failures."""


class EngineFailure(SweepError):
    """The calculation engine failed to recalculate a region."""

    def __init__(self, region, message: str = ""):
        self.region = region
        super().__init__(message or f"Recalculation failed for {region}")


class SchemaMismatch(SweepError, ValueError):
    """A row block does not match the column layout of its destination table."""


class SummaryWindowError(SweepError, ValueError):
    """The summary table produced fewer rows than the term requires."""

    def __init__(self, table: str, available: int, term: int):
        self.table = table
        self.available = available
        self.term = term
        super().__init__(
            f"{table} has {available} rows but the term needs {term} "
            f"(summary shorter than term)."
        )


class WorkbookError(SweepError, LookupError):
    """Unknown table/range, or a write outside a table's rows."""
