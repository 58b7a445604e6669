from datetime import date, datetime

import pytest

from finance_tracker.models import DateRange, PeriodKind
from finance_tracker.periods import resolve_period


def test_weekly_range_runs_monday_to_sunday():
    # 2024-06-20 is a Thursday
    result = resolve_period(PeriodKind.WEEKLY, date(2024, 6, 20))
    assert result == DateRange(date(2024, 6, 17), date(2024, 6, 23))
    assert result.start.weekday() == 0
    assert result.end.weekday() == 6


def test_weekly_range_on_sunday_stays_in_same_week():
    result = resolve_period(PeriodKind.WEEKLY, date(2024, 6, 23))
    assert result.start == date(2024, 6, 17)


def test_weekly_range_crosses_year_boundary():
    result = resolve_period(PeriodKind.WEEKLY, date(2025, 1, 1))
    assert result == DateRange(date(2024, 12, 30), date(2025, 1, 5))


def test_monthly_range_handles_leap_february():
    result = resolve_period(PeriodKind.MONTHLY, date(2024, 2, 10))
    assert result == DateRange(date(2024, 2, 1), date(2024, 2, 29))


@pytest.mark.parametrize(
    "reference, expected",
    [
        (date(2024, 1, 15), DateRange(date(2024, 1, 1), date(2024, 3, 31))),
        (date(2024, 5, 31), DateRange(date(2024, 4, 1), date(2024, 6, 30))),
        (date(2024, 9, 1), DateRange(date(2024, 7, 1), date(2024, 9, 30))),
        (date(2024, 12, 31), DateRange(date(2024, 10, 1), date(2024, 12, 31))),
    ],
)
def test_quarterly_range(reference, expected):
    assert resolve_period(PeriodKind.QUARTERLY, reference) == expected


def test_yearly_range():
    result = resolve_period(PeriodKind.YEARLY, date(2024, 6, 20))
    assert result == DateRange(date(2024, 1, 1), date(2024, 12, 31))


def test_datetime_reference_is_truncated_and_string_period_accepted():
    result = resolve_period("monthly", datetime(2024, 6, 30, 23, 59, 59))
    assert result == DateRange(date(2024, 6, 1), date(2024, 6, 30))


def test_default_reference_is_today():
    result = resolve_period(PeriodKind.MONTHLY)
    assert result.contains(date.today())


def test_unknown_period_is_rejected():
    with pytest.raises(ValueError):
        resolve_period("fortnightly", date(2024, 6, 20))
