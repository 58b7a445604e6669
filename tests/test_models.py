from datetime import date, datetime
from decimal import Decimal

import pytest

from finance_tracker.exceptions import InvariantViolation
from finance_tracker.models import (
    Budget,
    DateRange,
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


def test_date_range_rejects_inverted_bounds():
    with pytest.raises(InvariantViolation):
        DateRange(date(2024, 6, 2), date(2024, 6, 1))


def test_date_range_contains_accepts_datetimes():
    window = DateRange(date(2024, 6, 1), date(2024, 6, 30))
    assert window.contains(datetime(2024, 6, 30, 23, 59, 59))
    assert not window.contains(date(2024, 7, 1))


def test_invariant_violation_is_a_value_error():
    with pytest.raises(ValueError):
        Budget('b', 'Zero', 0)


def test_record_coerces_amount_kind_and_date():
    record = Record('1', '2024-06-01', 10.1, 'expense')
    assert record.amount == Decimal('10.1')
    assert record.kind is Kind.EXPENSE
    assert record.date == date(2024, 6, 1)


def test_record_from_dict_reads_nested_category():
    record = Record.from_dict({
        'id': 7,
        'transaction_date': '2024-06-01',
        'amount': 25,
        'type': 'expense',
        'categories': {'id': 'c1', 'name': 'Food'},
        'description': None,
    })
    assert record.id == '7'
    assert record.category_id == 'c1'
    assert record.category_name == 'Food'


def test_fixed_expense_from_dict_and_group_accessors():
    expense = FixedExpense.from_dict({
        'id': 'e1',
        'name': 'Rent',
        'amount': '1200.50',
        'paid': 0,
        'month': '2024-06-01',
        'expense_groups': {'id': 'g1', 'name': 'Housing'},
    })
    assert expense.amount == Decimal('1200.50')
    assert expense.paid is False
    assert expense.group_id == 'g1'
    assert expense.group_name == 'Housing'
    assert FixedExpense('e2', 'Misc', None).group_name is None


def test_fixed_expense_without_month_cannot_become_record():
    with pytest.raises(InvariantViolation):
        FixedExpense('e', 'Draft', 5).to_record()


def test_budget_from_dict():
    budget = Budget.from_dict({
        'id': 'b1', 'name': 'Food', 'amount': 200, 'period': 'quarterly',
        'category_id': 'food-id', 'start_date': '2024-01-01', 'end_date': None,
    })
    assert budget.period is PeriodKind.QUARTERLY
    assert budget.start_date == date(2024, 1, 1)
    assert budget.is_active


def test_filter_state_round_trip_and_legacy_keys():
    state = FilterState(group_id='g1', paid_status='unpaid', payment_source='visa')
    assert FilterState.from_dict(state.to_dict()) == state

    legacy = FilterState.from_dict({'groupId': 'all', 'paidStatus': 'paid', 'paymentSource': None})
    assert legacy.paid_status is PaidStatus.PAID
    assert legacy.payment_source == ''


def test_sort_config_round_trip():
    sort = SortConfig('due_date', 'desc')
    assert sort.key is SortKey.DUE_DATE
    assert sort.direction is SortDirection.DESCENDING
    assert SortConfig.from_dict(sort.to_dict()) == sort
    assert SortConfig.from_dict(None) is None


def test_invalid_enum_values_are_rejected():
    with pytest.raises(ValueError):
        FilterState(paid_status='sometimes')
    with pytest.raises(ValueError):
        SortConfig('colour')


@pytest.mark.parametrize("stored, expected", [
    ('ingreso', Kind.INCOME),
    ('egreso', Kind.EXPENSE),
    ('ahorro', Kind.SAVING),
])
def test_record_from_dict_maps_stored_type_values(stored, expected):
    record = Record.from_dict({'id': 1, 'transaction_date': '2024-06-01', 'amount': 5, 'type': stored})
    assert record.kind is expected


def test_fixed_expense_from_dict_keeps_flat_group_id():
    expense = FixedExpense.from_dict({'id': 'e', 'name': 'Rent', 'amount': 1, 'expense_group_id': 'g1'})
    assert expense.group_id == 'g1'
    assert expense.group_name == ''
