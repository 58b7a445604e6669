#!/usr/bin/env python3
"""Print a report summary for records exported as JSON.

The input file holds an object with optional ``transactions``,
``fixed_expenses`` and ``budgets`` lists, each entry shaped like the rows
the data store returns.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from finance_tracker import (
    Budget,
    FixedExpense,
    Record,
    category_breakdown,
    combine_for_report,
    config,
    progress_frame,
    sum_income_expense,
)
from finance_tracker.export import export_csv
from finance_tracker.formatting import format_currency
from finance_tracker.logger import setup_logger
from finance_tracker.models import to_date

logger = setup_logger("finance_tracker.scripts")


def load_payload(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def main(path: Path, reference: Optional[date] = None, csv_out: Optional[Path] = None) -> int:
    try:
        payload = load_payload(path)
    except (OSError, ValueError) as exc:
        logger.error("Could not read %s: %s", path, exc)
        return 1

    try:
        transactions = [Record.from_dict(row) for row in payload.get("transactions", [])]
        fixed = [FixedExpense.from_dict(row) for row in payload.get("fixed_expenses", [])]
        budgets = [Budget.from_dict(row) for row in payload.get("budgets", [])]
    except (KeyError, ValueError) as exc:
        logger.error("Invalid row in %s: %r", path, exc)
        return 1
    logger.info(
        "Loaded %d transactions, %d fixed expenses, %d budgets",
        len(transactions), len(fixed), len(budgets),
    )

    records = combine_for_report(transactions, fixed)
    if not records:
        print("No records to summarize.")
        return 0

    totals = sum_income_expense(records)
    print(f"Income:  {format_currency(totals.income)}")
    print(f"Expense: {format_currency(totals.expense)}")
    print(f"Balance: {format_currency(totals.balance)}")

    print("\nExpenses by category:")
    print(category_breakdown(records).to_string(index=False))

    if budgets:
        print("\nBudgets:")
        print(progress_frame(budgets, records, reference).to_string(index=False))

    if csv_out is not None:
        if Path(csv_out) == config.EXPORTS_DIR:
            config.ensure_data_directories()
        written = export_csv(records, csv_out)
        print(f"\nExported CSV to {written}")
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Summarize transactions, fixed expenses and budgets.')
    parser.add_argument('path', type=Path, help='JSON file with transactions/fixed_expenses/budgets')
    parser.add_argument('--date', type=to_date, default=None, help='Reference day (YYYY-MM-DD) for budget periods')
    parser.add_argument(
        '--csv', type=Path, nargs='?', const=config.EXPORTS_DIR, default=None,
        help='Also export the combined records to this CSV path (defaults to the exports directory)',
    )
    args = parser.parse_args()
    raise SystemExit(main(args.path, reference=args.date, csv_out=args.csv))
