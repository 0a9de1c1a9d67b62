"""Mini README: Exception hierarchy raised by the ledger engine and store.

Every error derives from ``LedgerError`` so the command line front end can
report business failures per operation and keep going. The format errors
also subclass ``ValueError`` and ``NotFoundError`` subclasses ``LookupError``
so callers that only know the builtin types still catch them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LedgerError(Exception):
    """Base class for all expense ledger failures."""


class AmountFormatError(LedgerError, ValueError):
    """An amount did not parse as a finite decimal number."""

    def __init__(self, raw_value: object) -> None:
        super().__init__(f"Invalid amount format: {raw_value!r}")
        self.raw_value = raw_value


class CategoryFormatError(LedgerError, ValueError):
    """A category token matched no member of ``ExpenseCategory``."""

    def __init__(self, raw_value: object) -> None:
        super().__init__(f"Invalid category: {raw_value!r}")
        self.raw_value = raw_value


class MonthFormatError(LedgerError, ValueError):
    """A month token was neither 1-12 nor an English month name."""

    def __init__(self, raw_value: object) -> None:
        super().__init__(f"Invalid month: {raw_value!r} (expected 1-12 or a month name)")
        self.raw_value = raw_value


class BudgetFormatError(LedgerError, ValueError):
    """A budget cap was negative or not a number."""


class NotFoundError(LedgerError, LookupError):
    """No expense in the current snapshot carries the requested id."""

    def __init__(self, expense_id: str) -> None:
        super().__init__(f"Expense with ID {expense_id} not found.")
        self.expense_id = expense_id


class PersistenceError(LedgerError):
    """The ledger file could not be read or written."""

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        backup_path: Optional[Path] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.backup_path = backup_path
