"""Mini README: Expense ledger engine and persistence.

This package groups the domain types, the JSON-backed ``LedgerStore`` and
the ``LedgerEngine`` that applies business rules to one loaded snapshot.
Front ends construct a store for the configured file, hand it to a fresh
engine, call ``load()``, run operations, then ``save()``.
"""

from .engine import LedgerEngine
from .models import (
    Budget,
    BudgetStatus,
    Expense,
    ExpenseCategory,
    ExpenseSummary,
    MonthSummary,
    month_label,
    parse_amount,
    parse_month,
)
from .store import LedgerStore

__all__ = [
    "Budget",
    "BudgetStatus",
    "Expense",
    "ExpenseCategory",
    "ExpenseSummary",
    "LedgerEngine",
    "LedgerStore",
    "MonthSummary",
    "month_label",
    "parse_amount",
    "parse_month",
]
