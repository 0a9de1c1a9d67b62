"""Mini README: Domain types for the expense ledger.

Structure:
    * ExpenseCategory - closed enumeration of spending categories.
    * Expense - dataclass for one recorded monetary event plus JSON helpers.
    * Budget - monthly spending cap keyed by month-of-year.
    * ExpenseSummary / MonthSummary / BudgetStatus - query results.
    * parse_amount / parse_month / parse_date - input coercion helpers.

Amounts are ``Decimal`` throughout so sums and the on-disk form never pick
up binary floating point noise. Months are plain integers 1-12 without a
year component, which is how both expense bucketing and budgets key them.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, List, Optional

from ..errors import AmountFormatError, CategoryFormatError, MonthFormatError

ZERO = Decimal("0")


class ExpenseCategory(str, Enum):
    """Enumerate the supported spending categories."""

    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    HEALTH = "health"
    OTHER = "other"

    @classmethod
    def from_str(cls, value: object) -> "ExpenseCategory":
        """Coerce arbitrary casing into a valid category."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower()
            return cls(normalised)
        except ValueError as error:
            raise CategoryFormatError(value) from error

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]


def parse_amount(value: object) -> Decimal:
    """Parse strings, ints, floats or decimals into a finite ``Decimal``."""

    if isinstance(value, bool):
        raise AmountFormatError(value)
    try:
        if isinstance(value, float):
            amount = Decimal(repr(value))
        else:
            amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as error:
        raise AmountFormatError(value) from error
    if not amount.is_finite():
        raise AmountFormatError(value)
    return amount


_MONTH_LOOKUP: Dict[str, int] = {}
for _number in range(1, 13):
    _MONTH_LOOKUP[calendar.month_name[_number].lower()] = _number
    _MONTH_LOOKUP[calendar.month_abbr[_number].lower()] = _number


def parse_month(value: object) -> int:
    """Return a month-of-year number from ``5``, ``"05"``, ``"may"`` or ``"MAY"``."""

    if isinstance(value, bool):
        raise MonthFormatError(value)
    if isinstance(value, int):
        month = value
    else:
        token = str(value).strip().lower()
        if token.isdigit():
            month = int(token)
        elif token in _MONTH_LOOKUP:
            return _MONTH_LOOKUP[token]
        else:
            raise MonthFormatError(value)
    if not 1 <= month <= 12:
        raise MonthFormatError(value)
    return month


def month_label(month: int) -> str:
    return calendar.month_name[month].upper()


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


@dataclass(slots=True)
class Expense:
    """Represent one recorded expense.

    ``expense_id`` is assigned once by the engine and never changes. The
    serialised form uses the short keys ``id`` and ``date`` so files written
    by earlier versions of the tool stay readable.
    """

    expense_id: str
    amount: Decimal
    description: str
    occurred_on: date
    category: ExpenseCategory = ExpenseCategory.OTHER

    @property
    def month(self) -> int:
        return self.occurred_on.month

    def as_dict(self) -> Dict[str, str]:
        """Export the expense with JSON serialisable values."""

        return {
            "id": self.expense_id,
            "amount": str(self.amount),
            "description": self.description,
            "date": self.occurred_on.isoformat(),
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, record: Dict[str, object]) -> "Expense":
        """Rebuild an expense from a stored record.

        Raises ``ValueError`` (or one of its ledger subclasses) when a field
        is missing or malformed. Integer ids from counter-based files are
        stringified; a missing category means the record predates
        categories and becomes ``OTHER``.
        """

        if not isinstance(record, dict):
            raise ValueError(f"Expense records must be objects, got {type(record).__name__}")
        missing = [key for key in ("id", "amount", "description", "date") if key not in record]
        if missing:
            raise ValueError(f"Expense record is missing fields: {', '.join(missing)}")

        raw_id = record["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)) or str(raw_id) == "":
            raise ValueError(f"Expense id must be a non-empty string or integer, got {raw_id!r}")
        description = record["description"]
        if not isinstance(description, str):
            raise ValueError("Expense description must be a string")
        raw_category = record.get("category")
        category = (
            ExpenseCategory.OTHER
            if raw_category is None
            else ExpenseCategory.from_str(raw_category)
        )
        return cls(
            expense_id=str(raw_id),
            amount=parse_amount(record["amount"]),
            description=description,
            occurred_on=parse_date(record["date"]),
            category=category,
        )


@dataclass(slots=True)
class Budget:
    """Spending cap for one month-of-year."""

    month: int
    amount: Decimal


@dataclass(slots=True)
class ExpenseSummary:
    """Total across the ledger; ``count == 0`` means nothing was recorded."""

    count: int
    total: Decimal = ZERO

    @property
    def is_empty(self) -> bool:
        return self.count == 0


@dataclass(slots=True)
class MonthSummary:
    """Expenses falling in one month-of-year, across every year."""

    month: int
    expenses: List[Expense] = field(default_factory=list)
    total: Decimal = ZERO

    @property
    def is_empty(self) -> bool:
        return not self.expenses


@dataclass(slots=True)
class BudgetStatus:
    """Outcome of comparing a month's spending with its cap."""

    month: int
    total: Decimal
    cap: Optional[Decimal]

    @property
    def exceeded(self) -> bool:
        """Strictly greater than the cap; an absent cap is never exceeded."""

        return self.cap is not None and self.total > self.cap

    @property
    def remaining(self) -> Optional[Decimal]:
        if self.cap is None:
            return None
        return self.cap - self.total
