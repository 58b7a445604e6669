"""Budget progress calculations.

This module computes how much of a budget has been consumed by matching
expenses inside the budget's current period, and builds a tabular
snapshot of several budgets for reports and charts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, List, Optional, Union

import pandas as pd

from .exceptions import InvariantViolation
from .models import Budget, Kind, Record
from .periods import resolve_period

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


@dataclass(frozen=True)
class BudgetProgress:
    """Spent amount and percentage consumed (capped to 0..100)."""
    spent: Decimal
    percentage: Decimal

    def remaining(self, budget: Budget) -> Decimal:
        """Budget left in the period; negative once overspent."""
        return budget.amount - self.spent

    def is_over(self, budget: Budget) -> bool:
        return self.spent > budget.amount


def _in_scope(record: Record, budget: Budget) -> bool:
    if record.kind is not Kind.EXPENSE:
        return False
    return budget.category_id is None or record.category_id == budget.category_id


def compute_progress(
    budget: Budget,
    records: Optional[Iterable[Record]],
    now: Optional[Union[date, datetime]] = None,
) -> BudgetProgress:
    """Calculate budget consumption for the period containing ``now``.

    Only expense records dated inside the period count, restricted to the
    budget's category when it has one. The percentage never leaves the
    0..100 band even when the budget is overspent; the raw overspend is
    ``spent - budget.amount``.

    Args:
        budget: Budget to evaluate
        records: Candidate records. ``None`` or empty yields zero progress.
        now: Reference day used to resolve the period. Defaults to today.

    Returns:
        ``BudgetProgress`` with ``spent`` and ``percentage``

    Raises:
        InvariantViolation: If ``budget.amount`` is not positive
    """
    if budget.amount <= 0:
        raise InvariantViolation(f"Budget '{budget.name}' has non-positive amount {budget.amount}")

    if not records:
        return BudgetProgress(spent=Decimal(0), percentage=Decimal(0))

    period_range = resolve_period(budget.period, now)
    spent = sum(
        (
            record.amount
            for record in records
            if _in_scope(record, budget) and period_range.contains(record.date)
        ),
        Decimal(0),
    )
    percentage = min(max(spent / budget.amount * HUNDRED, Decimal(0)), HUNDRED)
    logger.debug(
        "Budget %s: spent %s of %s between %s and %s",
        budget.name, spent, budget.amount, period_range.start, period_range.end,
    )
    return BudgetProgress(spent=spent, percentage=percentage)


def overspend(budget: Budget, progress: BudgetProgress) -> Decimal:
    """Amount spent beyond the budget, zero when still within it."""
    return max(progress.spent - budget.amount, Decimal(0))


def progress_frame(
    budgets: Iterable[Budget],
    records: Optional[Iterable[Record]],
    now: Optional[Union[date, datetime]] = None,
) -> pd.DataFrame:
    """Create a DataFrame summarising progress of every active budget.

    Args:
        budgets: Budgets to evaluate; inactive ones are skipped
        records: Records shared by every budget
        now: Reference day for period resolution

    Returns:
        DataFrame with columns: Budget, Period, Amount, Spent, Remaining,
        Percent Used, Status (where Status is 'Over' or 'Under')
    """
    columns = ['Budget', 'Period', 'Amount', 'Spent', 'Remaining', 'Percent Used', 'Status']
    records = list(records or [])
    rows: List[dict] = []
    for budget in budgets:
        if not budget.is_active:
            continue
        progress = compute_progress(budget, records, now)
        rows.append({
            'Budget': budget.name,
            'Period': budget.period.value,
            'Amount': float(budget.amount),
            'Spent': float(progress.spent),
            'Remaining': float(progress.remaining(budget)),
            'Percent Used': float(progress.percentage),
            'Status': 'Over' if progress.is_over(budget) else 'Under',
        })
    return pd.DataFrame(rows, columns=columns)
