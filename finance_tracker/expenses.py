"""Filtering, sorting and totals for the fixed-expenses table.

The pipeline mirrors what the expenses table shows: a conjunctive set of
filters (group, paid status, payment source) followed by an optional
stable sort on one column. Values that are absent or unparseable always
sort after every valid value, whichever direction is requested.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar

from . import config
from .models import FilterState, FixedExpense, PaidStatus, SortConfig, SortDirection, SortKey

logger = logging.getLogger(__name__)

T = TypeVar('T')

_MISSING = object()


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def _passes_filters(expense: FixedExpense, filters: FilterState) -> bool:
    if filters.group_id != "all" and expense.group_id != filters.group_id:
        return False
    if filters.paid_status is not PaidStatus.ALL:
        if expense.paid != (filters.paid_status is PaidStatus.PAID):
            return False
    if filters.payment_source:
        source = expense.payment_source
        if source is None or filters.payment_source.lower() not in source.lower():
            return False
    return True


def filter_expenses(expenses: Iterable[FixedExpense], filters: FilterState) -> List[FixedExpense]:
    """Return the expenses that satisfy every active filter, in input order."""
    return [expense for expense in expenses if _passes_filters(expense, filters)]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def parse_due_date(value: Optional[str]) -> Optional[date]:
    """Parse a ``dd/MM/yyyy`` due date, returning ``None`` when it cannot be read."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), config.DUE_DATE_FORMAT).date()
    except (ValueError, TypeError, AttributeError):
        return None


def _sort_value(expense: FixedExpense, key: SortKey) -> Any:
    if key is SortKey.GROUP:
        return expense.group_name or ''
    if key is SortKey.DUE_DATE:
        parsed = parse_due_date(expense.due_date)
        return _MISSING if parsed is None else parsed
    if key is SortKey.AMOUNT:
        amount = expense.amount
        if amount is None or amount.is_nan():
            return _MISSING
        return amount
    value = getattr(expense, key.value)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return _MISSING
    return value


def sort_expenses(expenses: Sequence[FixedExpense], sort: Optional[SortConfig]) -> List[FixedExpense]:
    """Stable sort of ``expenses`` by ``sort``; ``None`` keeps input order."""
    if sort is None:
        return list(expenses)

    valid: List[Tuple[Any, FixedExpense]] = []
    missing: List[FixedExpense] = []
    for expense in expenses:
        value = _sort_value(expense, sort.key)
        if value is _MISSING:
            missing.append(expense)
        else:
            valid.append((value, expense))

    valid.sort(key=lambda pair: pair[0], reverse=sort.direction is SortDirection.DESCENDING)
    return [expense for _, expense in valid] + missing


def filter_and_sort(
    expenses: Iterable[FixedExpense],
    filters: FilterState,
    sort: Optional[SortConfig],
) -> List[FixedExpense]:
    """Filter then sort fixed expenses.

    Args:
        expenses: Expenses to process; never mutated
        filters: Group, paid status and payment-source filters
        sort: Column and direction, or ``None`` to keep insertion order

    Returns:
        A new list holding the matching expenses in display order

    Example:
        >>> rows = filter_and_sort(expenses, FilterState(paid_status='unpaid'),
        ...                        SortConfig(SortKey.AMOUNT, SortDirection.DESCENDING))
    """
    filtered = filter_expenses(expenses, filters)
    result = sort_expenses(filtered, sort)
    logger.debug("filter_and_sort kept %d expenses (sort=%s)", len(result), sort)
    return result


def next_sort_config(current: Optional[SortConfig], key: SortKey) -> Optional[SortConfig]:
    """Cycle the sort state after a click on column ``key``.

    A new column starts ascending, a second click flips to descending and a
    third click clears the sort.
    """
    key = SortKey(key)
    if current is None or current.key is not key:
        return SortConfig(key, SortDirection.ASCENDING)
    if current.direction is SortDirection.ASCENDING:
        return SortConfig(key, SortDirection.DESCENDING)
    return None


# ---------------------------------------------------------------------------
# Totals and pagination
# ---------------------------------------------------------------------------


class PaymentStatus(str, Enum):
    EMPTY = "empty"
    SETTLED = "settled"
    PARTIAL = "partial"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class ExpenseTotals:
    total: Decimal
    unpaid: Decimal
    status: PaymentStatus


def _amount_or_zero(expense: FixedExpense) -> Decimal:
    amount = expense.amount
    if amount is None or amount.is_nan():
        return Decimal(0)
    return amount


def expense_totals(expenses: Iterable[FixedExpense]) -> ExpenseTotals:
    """Total and unpaid amounts of a set of fixed expenses.

    The status summarises how much is still owed: nothing to pay
    (``EMPTY``), everything paid (``SETTLED``), nothing paid yet
    (``OVERDUE``) or somewhere in between (``PARTIAL``).
    """
    total = Decimal(0)
    unpaid = Decimal(0)
    for expense in expenses:
        amount = _amount_or_zero(expense)
        total += amount
        if not expense.paid:
            unpaid += amount

    if total <= 0:
        status = PaymentStatus.EMPTY
    elif unpaid <= 0:
        status = PaymentStatus.SETTLED
    elif unpaid >= total:
        status = PaymentStatus.OVERDUE
    else:
        status = PaymentStatus.PARTIAL
    return ExpenseTotals(total=total, unpaid=unpaid, status=status)


@dataclass(frozen=True)
class Page:
    items: List[Any]
    page: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


def paginate(items: Sequence[T], page: int = 1, per_page: int = config.ITEMS_PER_PAGE) -> Page:
    """Slice ``items`` into the requested page, clamping out-of-range pages."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    total_pages = math.ceil(len(items) / per_page)
    page = max(1, min(page, total_pages)) if total_pages else 1
    start = (page - 1) * per_page
    return Page(items=list(items[start:start + per_page]), page=page, total_pages=total_pages)
