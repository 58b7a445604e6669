"""Typed records consumed by the aggregation helpers.

Every entity here is a read-only view over data owned by whoever fetched
it. The helpers in this package only read these objects and derive new
collections from them; nothing is mutated in place.

Tagged variants (kind, period, sort direction, paid status) are modelled as
``Enum`` members so that loose option bags coming from stored preferences
are converted once, at the boundary, via the ``from_dict`` constructors.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional, Union

from . import config
from .exceptions import InvariantViolation

DateLike = Union[date, datetime, str]


class Kind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
    SAVING = "saving"


# Transaction type values as written by the data store
_STORED_KINDS = {
    'ingreso': Kind.INCOME,
    'egreso': Kind.EXPENSE,
    'ahorro': Kind.SAVING,
}


class PeriodKind(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class PaidStatus(str, Enum):
    ALL = "all"
    PAID = "paid"
    UNPAID = "unpaid"


class SortKey(str, Enum):
    """Sortable columns of the fixed-expenses table."""
    NAME = "name"
    AMOUNT = "amount"
    PAID = "paid"
    DUE_DATE = "due_date"
    PAYMENT_SOURCE = "payment_source"
    GROUP = "group"
    MONTH = "month"
    NOTES = "notes"


def to_decimal(value: Any) -> Optional[Decimal]:
    """Coerce a numeric value into ``Decimal``.

    Floats go through ``str`` so that ``0.1`` stays ``Decimal('0.1')``.
    ``None`` is passed through; values that cannot be parsed become
    ``Decimal('NaN')`` so callers can treat them as missing.
    """
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("NaN")


def to_date(value: DateLike) -> date:
    """Normalize a stored date into a calendar ``date``.

    Strings are read as ``YYYY-MM-DD`` using only the date part, so a stored
    ``2024-06-01T00:00:00Z`` stays June 1st whatever the viewer's offset.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).split("T")[0].strip())


def _enum_value(enum_cls, value):
    return value if isinstance(value, enum_cls) else enum_cls(value)


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvariantViolation(
                f"DateRange start {self.start} is after end {self.end}"
            )

    def contains(self, value: Union[date, datetime]) -> bool:
        if isinstance(value, datetime):
            value = value.date()
        return self.start <= value <= self.end


@dataclass(frozen=True)
class Record:
    """A transaction as seen by the aggregation helpers."""
    id: str
    date: date
    amount: Decimal
    kind: Kind
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'date', to_date(self.date))
        object.__setattr__(self, 'amount', to_decimal(self.amount))
        object.__setattr__(self, 'kind', _enum_value(Kind, self.kind))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        """Build a record from a loosely typed mapping.

        Accepts either a flat ``category_name`` or a nested ``categories``
        object with ``id``/``name`` keys, ``transaction_date`` as an alias for
        ``date`` and ``type`` as an alias for ``kind``. Stored type values
        (``ingreso``, ``egreso``, ``ahorro``) map onto ``Kind`` members.
        """
        category = data.get('categories') or {}
        kind = data.get('kind') or data['type']
        if isinstance(kind, str):
            kind = _STORED_KINDS.get(kind.lower(), kind)
        return cls(
            id=str(data['id']),
            date=data.get('date') or data['transaction_date'],
            amount=data['amount'],
            kind=kind,
            category_id=data.get('category_id') or category.get('id'),
            category_name=data.get('category_name') or category.get('name'),
            description=data.get('description'),
        )


@dataclass(frozen=True)
class ExpenseGroup:
    id: str
    name: str


@dataclass(frozen=True)
class FixedExpense:
    """A recurring monthly obligation tracked with a paid flag."""
    id: str
    name: str
    amount: Optional[Decimal]
    paid: bool = False
    month: Optional[date] = None
    due_date: Optional[str] = None  # dd/MM/yyyy
    payment_source: Optional[str] = None
    notes: Optional[str] = None
    group: Optional[ExpenseGroup] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'amount', to_decimal(self.amount))
        object.__setattr__(self, 'paid', bool(self.paid))
        if self.month is not None:
            object.__setattr__(self, 'month', to_date(self.month))

    @property
    def group_id(self) -> Optional[str]:
        return self.group.id if self.group else None

    @property
    def group_name(self) -> Optional[str]:
        return self.group.name if self.group else None

    def to_record(self) -> Record:
        """Express this fixed expense as an expense ``Record`` for reports."""
        if self.month is None:
            raise InvariantViolation(f"Fixed expense {self.id} has no month")
        return Record(
            id=f"fme-{self.id}",
            date=self.month,
            amount=self.amount if self.amount is not None else Decimal(0),
            kind=Kind.EXPENSE,
            category_id=self.group.id if self.group else config.NO_GROUP_ID,
            category_name=self.group_name or config.NO_GROUP_LABEL,
            description=f"{config.FIXED_EXPENSE_PREFIX}{self.name}",
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FixedExpense":
        """Build a fixed expense from a stored row.

        The group comes from a nested ``group``/``expense_groups`` object when
        the row was joined, otherwise from the flat ``expense_group_id``
        column with an empty name.
        """
        group_data = data.get('group') or data.get('expense_groups')
        group_id = data.get('expense_group_id')
        if group_data:
            group = ExpenseGroup(
                id=str(group_data.get('id', group_id)),
                name=group_data.get('name') or '',
            )
        elif group_id is not None:
            group = ExpenseGroup(id=str(group_id), name='')
        else:
            group = None
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            amount=data.get('amount'),
            paid=bool(data.get('paid', False)),
            month=data.get('month'),
            due_date=data.get('due_date'),
            payment_source=data.get('payment_source'),
            notes=data.get('notes'),
            group=group,
        )


@dataclass(frozen=True)
class Budget:
    """A spending limit for a recurring period, optionally per category."""
    id: str
    name: str
    amount: Decimal
    period: PeriodKind = PeriodKind.MONTHLY
    category_id: Optional[str] = None  # None means all categories
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: bool = True

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount)
        if amount is None or amount.is_nan() or amount <= 0:
            raise InvariantViolation(
                f"Budget '{self.name}' must have a positive amount, got {self.amount!r}"
            )
        object.__setattr__(self, 'amount', amount)
        object.__setattr__(self, 'period', _enum_value(PeriodKind, self.period))
        if self.start_date is not None:
            object.__setattr__(self, 'start_date', to_date(self.start_date))
        if self.end_date is not None:
            object.__setattr__(self, 'end_date', to_date(self.end_date))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Budget":
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            amount=data['amount'],
            period=data.get('period', PeriodKind.MONTHLY),
            category_id=data.get('category_id'),
            start_date=data.get('start_date'),
            end_date=data.get('end_date'),
            is_active=bool(data.get('is_active', True)),
        )


@dataclass(frozen=True)
class SortConfig:
    key: SortKey
    direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self) -> None:
        object.__setattr__(self, 'key', _enum_value(SortKey, self.key))
        object.__setattr__(self, 'direction', _enum_value(SortDirection, self.direction))

    def to_dict(self) -> Dict[str, str]:
        return {'key': self.key.value, 'direction': self.direction.value}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["SortConfig"]:
        if not data:
            return None
        return cls(key=data['key'], direction=data.get('direction', SortDirection.ASCENDING))


@dataclass(frozen=True)
class FilterState:
    """Filters applied to the fixed-expenses table. ``"all"`` disables the group filter."""
    group_id: str = "all"
    paid_status: PaidStatus = PaidStatus.ALL
    payment_source: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, 'paid_status', _enum_value(PaidStatus, self.paid_status))
        object.__setattr__(self, 'payment_source', self.payment_source or "")

    def to_dict(self) -> Dict[str, str]:
        return {
            'group_id': self.group_id,
            'paid_status': self.paid_status.value,
            'payment_source': self.payment_source,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FilterState":
        data = data or {}
        return cls(
            group_id=data.get('group_id', data.get('groupId', "all")) or "all",
            paid_status=data.get('paid_status', data.get('paidStatus', PaidStatus.ALL)),
            payment_source=data.get('payment_source', data.get('paymentSource', "")),
        )
