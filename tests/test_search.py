from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.models import Kind, Record
from finance_tracker.search import matches, plain_amount, search_records


def _record(description=None, category=None, amount=1200):
    return Record('r', date(2024, 6, 1), amount, Kind.EXPENSE, None, category, description)


def test_matches_category_substring():
    assert matches(_record(category='Rent'), 'ent')


def test_matches_amount_as_plain_string():
    assert matches(_record(category='Rent'), '1200')
    assert matches(_record(amount=Decimal('1200.00')), '1200')
    assert not matches(_record(amount=Decimal('1200.00')), '1200.00')


def test_matches_is_case_insensitive_and_trims_query():
    assert matches(_record(description='Weekly GROCERIES'), '  groceries ')


def test_missing_fields_do_not_match_text():
    assert not matches(_record(description=None, category=None, amount=5), 'none')


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_matches_everything(query):
    assert matches(_record(description=None, category=None), query)


def test_plain_amount_rendering():
    assert plain_amount(Decimal('12.50')) == '12.5'
    assert plain_amount(Decimal('1.2E+3')) == '1200'
    assert plain_amount(Decimal('0.05')) == '0.05'


def test_search_records_filters_list():
    records = [_record(description='Coffee', amount=3), _record(description='Rent', amount=900)]
    assert [r.description for r in search_records(records, 'coff')] == ['Coffee']
    assert search_records(records, '') == records


def test_plain_amount_handles_large_and_infinite_values():
    assert plain_amount(Decimal('1E+30')) == '1' + '0' * 30
    assert plain_amount(Decimal('Infinity')) == 'Infinity'
    assert matches(_record(amount=Decimal('1E+30')), '1')
