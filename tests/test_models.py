"""Mini README: Tests for the ledger domain types and parsing helpers.

Structure:
    * category parsing - case-insensitive lookup and clear failures.
    * amount and month parsing - decimals, month names, rejected tokens.
    * Expense records - stored layout and tolerant reading of older files.
    * BudgetStatus - strict-greater-than boundary.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from expense_ledger.errors import AmountFormatError, CategoryFormatError, MonthFormatError
from expense_ledger.ledger import BudgetStatus, Expense, ExpenseCategory, parse_amount, parse_month


def test_category_from_str_ignores_case_and_whitespace() -> None:
    """Category parsing should ignore casing and surrounding whitespace."""

    assert ExpenseCategory.from_str("FOOD") is ExpenseCategory.FOOD
    assert ExpenseCategory.from_str("  Transport ") is ExpenseCategory.TRANSPORT
    with pytest.raises(CategoryFormatError):
        ExpenseCategory.from_str("groceries")


def test_parse_amount_keeps_decimal_scale() -> None:
    """Parsed amounts should keep the scale the user typed."""

    assert parse_amount("12.50") == Decimal("12.50")
    assert str(parse_amount("12.50")) == "12.50"
    assert parse_amount(-3) == Decimal("-3")
    assert parse_amount(0.1) == Decimal("0.1")


@pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity", True])
def test_parse_amount_rejects_non_numbers(raw: object) -> None:
    """Non-numeric and non-finite amounts should raise."""

    with pytest.raises(AmountFormatError):
        parse_amount(raw)


def test_parse_month_accepts_numbers_and_names() -> None:
    """Months may be given as numbers or English names."""

    assert parse_month(5) == 5
    assert parse_month("05") == 5
    assert parse_month("MAY") == 5
    assert parse_month("sep") == 9
    assert parse_month("December") == 12


@pytest.mark.parametrize("raw", [0, 13, "13", "smarch", "-1"])
def test_parse_month_rejects_out_of_range(raw: object) -> None:
    """Unknown month tokens should raise a format error."""

    with pytest.raises(MonthFormatError):
        parse_month(raw)


def test_expense_as_dict_uses_stored_layout() -> None:
    """Serialised expenses should use the on-disk key names."""

    expense = Expense(
        expense_id="abc",
        amount=Decimal("18.75"),
        description="Office Supplies, \"misc\"\n  pens",
        occurred_on=date(2024, 1, 5),
        category=ExpenseCategory.OTHER,
    )

    assert expense.as_dict() == {
        "id": "abc",
        "amount": "18.75",
        "description": "Office Supplies, \"misc\"\n  pens",
        "date": "2024-01-05",
        "category": "other",
    }


def test_expense_from_dict_reads_older_records() -> None:
    """Integer ids, float amounts, upper-case categories and missing categories load."""

    with_enum_name = Expense.from_dict(
        {"id": 7, "amount": 12.5, "description": "Lunch", "date": "2024-03-02", "category": "FOOD"}
    )
    without_category = Expense.from_dict(
        {"id": "x", "amount": "1", "description": "Gum", "date": "2024-03-02"}
    )

    assert with_enum_name.expense_id == "7"
    assert with_enum_name.amount == Decimal("12.5")
    assert with_enum_name.category is ExpenseCategory.FOOD
    assert without_category.category is ExpenseCategory.OTHER


@pytest.mark.parametrize(
    "record",
    [
        {"amount": "1", "description": "x", "date": "2024-01-01"},
        {"id": "a", "amount": "one", "description": "x", "date": "2024-01-01"},
        {"id": "a", "amount": "1", "description": "x", "date": "01/02/2024"},
        {"id": "a", "amount": "1", "description": 5, "date": "2024-01-01"},
        {"id": "a", "amount": "1", "description": "x", "date": "2024-01-01", "category": "nope"},
        ["not", "an", "object"],
    ],
)
def test_expense_from_dict_rejects_malformed_records(record: object) -> None:
    """Malformed stored records should raise ValueError."""

    with pytest.raises(ValueError):
        Expense.from_dict(record)  # type: ignore[arg-type]


def test_budget_status_uses_strict_comparison() -> None:
    """Budget status should only flag spending strictly above the cap."""

    assert not BudgetStatus(month=1, total=Decimal("10.00"), cap=Decimal("10")).exceeded
    assert BudgetStatus(month=1, total=Decimal("10.01"), cap=Decimal("10")).exceeded
    assert not BudgetStatus(month=1, total=Decimal("999"), cap=None).exceeded
