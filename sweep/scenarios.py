from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Dict, List, Optional, Tuple

from core.schema import PRODUCT_SCENARIO_AXES, RISK_TYPES


@dataclass(frozen=True)
class ScenarioAxisSet:
    interest_rate_levels: Tuple[str, ...]
    premium_term_modes: Tuple[str, ...]
    risk_types: Tuple[str, ...] = RISK_TYPES

    @property
    def size(self) -> int:
        return len(self.interest_rate_levels) * len(self.premium_term_modes) * len(self.risk_types)


@dataclass(frozen=True)
class ScenarioCombination:
    interest_rate_level: str
    risk_type: str
    premium_term_mode: str

    @property
    def label(self) -> str:
        return f"{self.interest_rate_level} / {self.premium_term_mode} / {self.risk_type}"


def scenario_axes(
    product_code: str,
    table: Optional[Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]]] = None,
) -> Optional[ScenarioAxisSet]:
    """Axes for a product code, or None when the product is not configured."""
    table = PRODUCT_SCENARIO_AXES if table is None else table
    entry = table.get(str(product_code).strip())
    if entry is None:
        return None
    rates, prem_terms = entry
    return ScenarioAxisSet(tuple(rates), tuple(prem_terms))


def scenario_combinations(
    product_code: str,
    table: Optional[Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]]] = None,
) -> List[ScenarioCombination]:
    """
    All scenario combinations for a product, in sweep order:
    interest rate outer, premium term middle, risk type inner.

    Result rows are laid out in this order, so it must not change. An unknown
    product returns an empty list (nothing to sweep).
    """
    axes = scenario_axes(product_code, table)
    if axes is None:
        return []
    return [
        ScenarioCombination(interest_rate_level=rate, risk_type=risk, premium_term_mode=prem)
        for rate, prem, risk in product(
            axes.interest_rate_levels, axes.premium_term_modes, axes.risk_types
        )
    ]
