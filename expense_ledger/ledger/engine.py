"""Mini README: Business rules for the expense ledger.

Structure:
    * LedgerEngine - owns one in-memory snapshot of expenses and budgets and
      exposes add/update/delete, listing, summaries and budget checks.

An engine is built fresh for every command line invocation: it loads the
full expense sequence from a ``LedgerStore``, applies any number of
operations, and writes the whole sequence back only if an expense changed.
Budgets live in memory for the lifetime of the engine and are never saved.

Two failure policies differ on purpose. ``add_expense`` degrades an unknown
category to ``OTHER`` with a warning, while ``filter_by_category`` rejects
it so a typo never looks like "everything in OTHER". An unreadable ledger
file is reported as a warning and the engine continues empty.
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Iterator, List, Optional, Union

from ..errors import BudgetFormatError, CategoryFormatError, NotFoundError, PersistenceError
from ..logging_utils import get_logger
from .models import (
    ZERO,
    Budget,
    BudgetStatus,
    Expense,
    ExpenseCategory,
    ExpenseSummary,
    MonthSummary,
    parse_amount,
    parse_date,
    parse_month,
)
from .store import LedgerStore

LOGGER = get_logger(__name__)

AmountInput = Union[str, int, float, Decimal]
CategoryInput = Union[str, ExpenseCategory]
MonthInput = Union[int, str]


class LedgerEngine:
    """Manage the expenses and monthly budgets of a single invocation."""

    def __init__(
        self,
        store: Optional[LedgerStore] = None,
        *,
        expenses: Optional[Iterable[Expense]] = None,
    ) -> None:
        self.store = store
        self._expenses: List[Expense] = []
        self._budgets: Dict[int, Budget] = {}
        self.warnings: List[str] = []
        self.has_changes = False
        for expense in expenses or ():
            self._register(expense)
        LOGGER.debug("Ledger engine initialised with %s expenses", len(self._expenses))

    def _register(self, expense: Expense) -> None:
        """Append an expense ensuring identifiers remain unique."""

        if any(existing.expense_id == expense.expense_id for existing in self._expenses):
            raise ValueError(f"Expense {expense.expense_id} already exists.")
        self._expenses.append(expense)

    def _warn(self, message: str) -> None:
        LOGGER.warning(message)
        self.warnings.append(message)

    def drain_warnings(self) -> List[str]:
        """Return and clear warnings raised since the previous call."""

        pending, self.warnings = self.warnings, []
        return pending

    # -- persistence -----------------------------------------------------

    def load(self) -> None:
        """Replace the snapshot with the store's contents.

        Read failures do not abort: the engine keeps an empty ledger and
        records a warning. A subsequent save will overwrite the unreadable
        file, which is why the store can keep a ``.corrupt`` copy.
        """

        if self.store is None:
            raise RuntimeError("LedgerEngine.load() requires a store")
        self._expenses = []
        self.has_changes = False
        try:
            loaded = self.store.load()
        except PersistenceError as error:
            message = f"{error}. Continuing with an empty ledger."
            if error.backup_path is not None:
                message += f" The unreadable file was copied to {error.backup_path}."
            self._warn(message)
            return
        for expense in loaded:
            self._register(expense)

    def save(self) -> bool:
        """Persist the snapshot if an expense changed; return whether it wrote."""

        if self.store is None:
            raise RuntimeError("LedgerEngine.save() requires a store")
        if not self.has_changes:
            LOGGER.debug("No expense changes; skipping save")
            return False
        self.store.save(self._expenses)
        self.has_changes = False
        return True

    # -- mutations -------------------------------------------------------

    def add_expense(
        self,
        amount: AmountInput,
        description: str,
        *,
        occurred_on: Optional[Union[date, str]] = None,
        category: Optional[CategoryInput] = None,
    ) -> Expense:
        """Record a new expense with a freshly generated id."""

        parsed_amount = parse_amount(amount)
        resolved_category = ExpenseCategory.OTHER
        if category is not None:
            try:
                resolved_category = ExpenseCategory.from_str(category)
            except CategoryFormatError:
                self._warn(f"Invalid category {category!r} specified. Defaulting to OTHER.")

        expense = Expense(
            expense_id=self._next_id(),
            amount=parsed_amount,
            description=description,
            occurred_on=parse_date(occurred_on) if occurred_on is not None else date.today(),
            category=resolved_category,
        )
        self._register(expense)
        self.has_changes = True
        LOGGER.info("Added expense %s (%s)", expense.expense_id, expense.amount)
        return expense

    def _next_id(self) -> str:
        """Generate an identifier that cannot collide across invocations."""

        while True:
            candidate = str(uuid.uuid4())
            if all(expense.expense_id != candidate for expense in self._expenses):
                return candidate

    def get_expense(self, expense_id: str) -> Expense:
        """Retrieve an expense by exact id, raising ``NotFoundError`` when missing."""

        for expense in self._expenses:
            if expense.expense_id == expense_id:
                return expense
        raise NotFoundError(expense_id)

    def update_expense(
        self,
        expense_id: str,
        amount: AmountInput,
        description: str,
        category: Optional[CategoryInput] = None,
    ) -> Expense:
        """Change amount, description and optionally category in place.

        All inputs are validated before anything is touched; the id and the
        original date always survive.
        """

        expense = self.get_expense(expense_id)
        parsed_amount = parse_amount(amount)
        resolved_category = (
            ExpenseCategory.from_str(category) if category is not None else expense.category
        )
        expense.amount = parsed_amount
        expense.description = description
        expense.category = resolved_category
        self.has_changes = True
        LOGGER.info("Updated expense %s", expense_id)
        return expense

    def delete_expense(self, expense_id: str) -> Expense:
        """Remove the expense with ``expense_id`` and return it."""

        expense = self.get_expense(expense_id)
        self._expenses.remove(expense)
        self.has_changes = True
        LOGGER.info("Deleted expense %s", expense_id)
        return expense

    # -- queries ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self._expenses)

    def iter_expenses(self, category: Optional[CategoryInput] = None) -> Iterator[Expense]:
        """Yield expenses in insertion order, optionally limited to one category."""

        wanted = ExpenseCategory.from_str(category) if category is not None else None
        for expense in list(self._expenses):
            if wanted is None or expense.category is wanted:
                yield expense

    def summarise(self) -> ExpenseSummary:
        """Total every recorded amount."""

        total = sum((expense.amount for expense in self._expenses), ZERO)
        return ExpenseSummary(count=len(self._expenses), total=total)

    def _month_total(self, month: int) -> Decimal:
        return sum(
            (expense.amount for expense in self._expenses if expense.month == month), ZERO
        )

    def summarise_month(self, month: MonthInput) -> MonthSummary:
        """Collect expenses dated in ``month`` of any year."""

        month_number = parse_month(month)
        matching = [expense for expense in self._expenses if expense.month == month_number]
        total = sum((expense.amount for expense in matching), ZERO)
        return MonthSummary(month=month_number, expenses=matching, total=total)

    def filter_by_category(self, category: CategoryInput) -> List[Expense]:
        """Return expenses in ``category``; an unknown token raises ``CategoryFormatError``."""

        return list(self.iter_expenses(category))

    # -- budgets ---------------------------------------------------------

    @property
    def budgets(self) -> Dict[int, Budget]:
        return dict(self._budgets)

    def set_budget(self, month: MonthInput, amount: AmountInput) -> Budget:
        """Set or replace the cap for ``month``. Budgets are not persisted."""

        month_number = parse_month(month)
        try:
            cap = parse_amount(amount)
        except ValueError as error:
            raise BudgetFormatError(f"Invalid budget amount: {amount!r}") from error
        if cap < 0:
            raise BudgetFormatError(f"Budget must not be negative: {amount!r}")
        budget = Budget(month=month_number, amount=cap)
        self._budgets[month_number] = budget
        LOGGER.info("Budget for month %s set to %s", month_number, cap)
        return budget

    def check_budget(self, month: MonthInput) -> BudgetStatus:
        """Compare the month's spending with its cap, if one was set."""

        month_number = parse_month(month)
        budget = self._budgets.get(month_number)
        return BudgetStatus(
            month=month_number,
            total=self._month_total(month_number),
            cap=budget.amount if budget is not None else None,
        )
