"""Bucketing and totals over financial records.

The ``sum_*`` functions are the primitive aggregations: they work on plain
``Decimal`` values and return ordinary Python containers. The ``*_frame``
style helpers further down shape those totals into pandas DataFrames for
report tables and Plotly charts.

Dates are always treated as calendar dates; a record stored on
``2024-06-01`` is bucketed into ``2024-06`` regardless of the viewer's
timezone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd

from . import config
from .models import FixedExpense, Kind, Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthTotal:
    month_key: str  # YYYY-MM
    total: Decimal


@dataclass(frozen=True)
class IncomeExpense:
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def sum_by_category(records: Iterable[Record], kind: Kind) -> Dict[str, Decimal]:
    """Sum amounts of ``kind`` records per category name.

    Records without a category are collected under ``Uncategorized``. The
    mapping keeps the order in which each category was first encountered;
    use :func:`category_breakdown` for the largest-first ordering charts use.

    Example:
        >>> sum_by_category(records, Kind.EXPENSE)
        {'Food': Decimal('150')}
    """
    kind = Kind(kind)
    totals: Dict[str, Decimal] = {}
    for record in records:
        if record.kind is not kind:
            continue
        name = record.category_name or config.UNCATEGORIZED_LABEL
        totals[name] = totals.get(name, Decimal(0)) + record.amount
    return totals


def sum_by_month(records: Iterable[Record], kind: Kind) -> List[MonthTotal]:
    """Sum amounts of ``kind`` records per calendar month, ascending by month."""
    kind = Kind(kind)
    totals: Dict[str, Decimal] = {}
    for record in records:
        if record.kind is not kind:
            continue
        key = month_key(record.date)
        totals[key] = totals.get(key, Decimal(0)) + record.amount
    return [MonthTotal(month_key=key, total=totals[key]) for key in sorted(totals)]


def sum_income_expense(records: Iterable[Record]) -> IncomeExpense:
    """Split record amounts into income and outflow.

    Anything that is not income (expenses and savings alike) counts as
    outflow. The balance is left to the caller via ``IncomeExpense.balance``.
    """
    income = Decimal(0)
    expense = Decimal(0)
    for record in records:
        if record.kind is Kind.INCOME:
            income += record.amount
        else:
            expense += record.amount
    return IncomeExpense(income=income, expense=expense)


# ---------------------------------------------------------------------------
# Report frames
# ---------------------------------------------------------------------------


def category_breakdown(records: Iterable[Record], kind: Kind = Kind.EXPENSE) -> pd.DataFrame:
    """Create DataFrame of category totals, largest first.

    Returns:
        DataFrame with columns: Category, Total. Ties keep first-encounter order.
    """
    totals = sum_by_category(records, kind)
    frame = pd.DataFrame(
        {'Category': list(totals.keys()), 'Total': [float(v) for v in totals.values()]},
        columns=['Category', 'Total'],
    )
    if frame.empty:
        return frame
    return frame.sort_values('Total', ascending=False, kind='mergesort').reset_index(drop=True)


def daily_trend(records: Iterable[Record], kind: Kind = Kind.EXPENSE) -> pd.DataFrame:
    """Create DataFrame of per-day totals for ``kind``, ascending by date."""
    kind = Kind(kind)
    totals: Dict[date, Decimal] = {}
    for record in records:
        if record.kind is kind:
            totals[record.date] = totals.get(record.date, Decimal(0)) + record.amount
    days = sorted(totals)
    return pd.DataFrame(
        {'Date': pd.to_datetime(days), 'Total': [float(totals[d]) for d in days]},
        columns=['Date', 'Total'],
    )


def _shift_month(day: date, months: int) -> date:
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def monthly_balance(
    records: Iterable[Record],
    projections: Optional[Mapping[str, Mapping[str, float]]] = None,
    reference: Optional[Union[date, datetime]] = None,
    months_ahead: int = config.PROJECTION_MONTHS,
) -> pd.DataFrame:
    """Create DataFrame of monthly income, outflow and balance plus projections.

    Historical months come first in ascending order, followed by the
    ``months_ahead`` months after ``reference`` populated from
    ``projections`` (keyed by ``YYYY-MM`` with ``income``/``expense``
    entries; months without a projection are zero).

    Returns:
        DataFrame with columns: Month, Income, Expense, Balance, Projection
    """
    if reference is None:
        reference = date.today()
    elif isinstance(reference, datetime):
        reference = reference.date()
    projections = projections or {}

    by_month: Dict[str, List[Decimal]] = {}
    for record in records:
        bucket = by_month.setdefault(month_key(record.date), [Decimal(0), Decimal(0)])
        if record.kind is Kind.INCOME:
            bucket[0] += record.amount
        else:
            bucket[1] += record.amount

    rows = []
    for key in sorted(by_month):
        income, expense = by_month[key]
        rows.append({
            'Month': key,
            'Income': float(income),
            'Expense': float(expense),
            'Balance': float(income - expense),
            'Projection': False,
        })

    for offset in range(1, months_ahead + 1):
        key = month_key(_shift_month(reference, offset))
        projection = projections.get(key) or {}
        income = float(projection.get('income', 0) or 0)
        expense = float(projection.get('expense', 0) or 0)
        rows.append({
            'Month': key,
            'Income': income,
            'Expense': expense,
            'Balance': income - expense,
            'Projection': True,
        })

    return pd.DataFrame(rows, columns=['Month', 'Income', 'Expense', 'Balance', 'Projection'])


def combine_for_report(
    transactions: Iterable[Record],
    fixed_expenses: Iterable[FixedExpense],
    kind: Optional[Kind] = None,
) -> List[Record]:
    """Merge transactions and fixed expenses into one report list.

    Fixed expenses are expressed as expense records; they are left out when
    the report is restricted to income. The result is newest first.
    """
    combined = list(transactions)
    if kind is None or Kind(kind) is not Kind.INCOME:
        combined.extend(expense.to_record() for expense in fixed_expenses if expense.month is not None)
    if kind is not None:
        kind = Kind(kind)
        combined = [record for record in combined if record.kind is kind]
    combined.sort(key=lambda record: record.date, reverse=True)
    logger.debug("Combined report holds %d records", len(combined))
    return combined
