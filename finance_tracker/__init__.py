"""Top‑level package for the Finance Tracker aggregation library.

This package turns already-fetched financial records into the derived
views a personal-finance tracker displays.  The primary modules are:

* ``periods`` – resolve weekly/monthly/quarterly/yearly budget periods
* ``budgets`` – budget progress for the current period
* ``expenses`` – filtering, sorting and totals for fixed monthly expenses
* ``aggregation`` – totals bucketed by category and calendar month
* ``search`` – free-text matching of transactions
* ``export`` / ``visualization`` – CSV reports and Plotly figures

All core functions are pure: they never mutate their inputs and never
perform I/O.  Fetching the data is the caller's job.
"""

from .aggregation import (
    IncomeExpense,
    MonthTotal,
    category_breakdown,
    combine_for_report,
    daily_trend,
    monthly_balance,
    sum_by_category,
    sum_by_month,
    sum_income_expense,
)
from .budgets import BudgetProgress, compute_progress, overspend, progress_frame
from .exceptions import EmptyExportError, FinanceTrackerError, InvariantViolation
from .expenses import (
    ExpenseTotals,
    PaymentStatus,
    expense_totals,
    filter_and_sort,
    next_sort_config,
    paginate,
)
from .models import (
    Budget,
    DateRange,
    ExpenseGroup,
    FilterState,
    FixedExpense,
    Kind,
    PaidStatus,
    PeriodKind,
    Record,
    SortConfig,
    SortDirection,
    SortKey,
)
from .periods import resolve_period
from .search import matches, search_records

__all__ = [
    # Models
    'Budget',
    'DateRange',
    'ExpenseGroup',
    'FilterState',
    'FixedExpense',
    'Kind',
    'PaidStatus',
    'PeriodKind',
    'Record',
    'SortConfig',
    'SortDirection',
    'SortKey',
    # Errors
    'EmptyExportError',
    'FinanceTrackerError',
    'InvariantViolation',
    # Periods and budgets
    'resolve_period',
    'BudgetProgress',
    'compute_progress',
    'overspend',
    'progress_frame',
    # Expenses
    'ExpenseTotals',
    'PaymentStatus',
    'expense_totals',
    'filter_and_sort',
    'next_sort_config',
    'paginate',
    # Aggregation
    'IncomeExpense',
    'MonthTotal',
    'category_breakdown',
    'combine_for_report',
    'daily_trend',
    'monthly_balance',
    'sum_by_category',
    'sum_by_month',
    'sum_income_expense',
    # Search
    'matches',
    'search_records',
]
