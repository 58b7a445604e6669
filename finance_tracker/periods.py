"""Resolve a budget period cadence into a concrete date range."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Union

from .models import DateRange, PeriodKind


def _month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def resolve_period(
    period: Union[PeriodKind, str],
    reference: Optional[Union[date, datetime]] = None,
) -> DateRange:
    """Return the calendar range of ``period`` that contains ``reference``.

    Args:
        period: Cadence of the range (weekly, monthly, quarterly, yearly)
        reference: Day that must fall inside the range. Defaults to today;
            datetimes are truncated to their calendar date.

    Returns:
        Inclusive ``DateRange``. Weeks run Monday through Sunday; quarters
        are the January, April, July and October blocks.

    Example:
        >>> resolve_period(PeriodKind.MONTHLY, date(2024, 6, 20))
        DateRange(start=datetime.date(2024, 6, 1), end=datetime.date(2024, 6, 30))
    """
    period = PeriodKind(period)
    if reference is None:
        reference = date.today()
    elif isinstance(reference, datetime):
        reference = reference.date()

    if period is PeriodKind.WEEKLY:
        start = reference - timedelta(days=reference.weekday())
        return DateRange(start, start + timedelta(days=6))
    if period is PeriodKind.MONTHLY:
        return DateRange(reference.replace(day=1), _month_end(reference.year, reference.month))
    if period is PeriodKind.QUARTERLY:
        first_month = (reference.month - 1) // 3 * 3 + 1
        return DateRange(
            date(reference.year, first_month, 1),
            _month_end(reference.year, first_month + 2),
        )
    return DateRange(date(reference.year, 1, 1), date(reference.year, 12, 31))
