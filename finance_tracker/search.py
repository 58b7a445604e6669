"""Free-text search over transaction records."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from .models import Record


def plain_amount(amount: Decimal) -> str:
    """Render an amount without currency formatting or trailing zeros.

    >>> plain_amount(Decimal('1200.00'))
    '1200'
    >>> plain_amount(Decimal('12.50'))
    '12.5'
    >>> plain_amount(Decimal('1E+30'))
    '1000000000000000000000000000000'
    """
    if amount.is_nan():
        return 'NaN'
    return format(amount.normalize(), 'f')


def matches(record: Record, query: str) -> bool:
    """Case-insensitive match of ``query`` against description, category and amount.

    A blank query matches every record.
    """
    needle = (query or '').strip().lower()
    if not needle:
        return True
    description = (record.description or '').lower()
    category = (record.category_name or '').lower()
    return needle in description or needle in category or needle in plain_amount(record.amount)


def search_records(records: Iterable[Record], query: str) -> List[Record]:
    return [record for record in records if matches(record, query)]
