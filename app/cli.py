"""
cf-sweep — command line helpers around the sweep core.

  cf-sweep scenarios ILP01
  cf-sweep withdrawals model.xlsx --csv withdrawals.csv

The full sweep needs a live calculation engine and is driven from the host
binding (see sweep.runner.run_cashflows); the commands here only cover the
parts that do not.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from core.config import SweepConfig
from core.schema import WITHDRAWAL_OUTPUT_COLUMNS
from sweep.scenarios import scenario_combinations
from sweep.schedule import normalize_withdrawal_table
from workbook.loader import workbook_from_xlsx


def _cmd_scenarios(args: argparse.Namespace) -> int:
    combos = scenario_combinations(args.product)
    if not combos:
        print(f"No scenarios configured for product {args.product!r}.")
        return 0
    df = pd.DataFrame(
        [(c.interest_rate_level, c.premium_term_mode, c.risk_type) for c in combos],
        columns=["Interest Rate", "Premium Term", "Risk Type"],
    )
    df.index.name = "Scenario"
    print(df.to_string())
    return 0


def _cmd_withdrawals(args: argparse.Namespace) -> int:
    book = workbook_from_xlsx(args.workbook)
    rows = normalize_withdrawal_table(book, SweepConfig())
    df = pd.DataFrame([w.as_row() for w in rows], columns=list(WITHDRAWAL_OUTPUT_COLUMNS))
    if args.csv:
        df.to_csv(args.csv, index=False)
        print(f"Wrote {len(df)} rows to {args.csv}")
    else:
        print(df.to_string(index=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cf-sweep", description=__doc__.split("\n\n")[0])
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    sc = sub.add_parser("scenarios", help="list scenario combinations for a product")
    sc.add_argument("product")
    sc.set_defaults(func=_cmd_scenarios)

    wd = sub.add_parser("withdrawals", help="expand tblWithdrawal of an .xlsx workbook")
    wd.add_argument("workbook")
    wd.add_argument("--csv", default=None, help="write the schedule to this CSV file")
    wd.set_defaults(func=_cmd_withdrawals)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
